"""Shell wrapper generation for `gwt config shell init`.

The wrapper is a shell function named `gwt` that shadows the executable. It
gives each invocation a fresh directive file, runs the real binary with
GWT_DIRECTIVE_FILE pointing at it, and sources whatever `cd` line gwt left
behind. Without it, gwt can never move the caller's shell.
"""

from gwt.core.completion import SUPPORTED_SHELLS
from gwt.core.directive import DIRECTIVE_FILE_ENV
from gwt.core.errors import UnsupportedShell

RC_FILES = {
    "bash": "~/.bashrc",
    "zsh": "~/.zshrc",
}

_WRAPPER_TEMPLATE = """\
# gwt shell integration for {shell}
# Add to {rc_file}:
#   eval "$(gwt config shell init {shell})"
gwt() {{
    local directive_file exit_code
    directive_file="$(mktemp "${{TMPDIR:-/tmp}}/gwt-directive.XXXXXX")" || return 1
    {env_var}="$directive_file" command gwt "$@"
    exit_code=$?
    if [ -s "$directive_file" ]; then
        . "$directive_file"
    fi
    rm -f "$directive_file"
    return $exit_code
}}
"""


def render_shell_wrapper(shell: str) -> str:
    """Render the `gwt()` wrapper function for bash or zsh.

    Raises:
        UnsupportedShell: For any other shell
    """
    if shell not in SUPPORTED_SHELLS:
        raise UnsupportedShell(shell)
    return _WRAPPER_TEMPLATE.format(
        shell=shell,
        rc_file=RC_FILES[shell],
        env_var=DIRECTIVE_FILE_ENV,
    )
