"""
hbsdcontrol CLI package

Display helpers, input validation and the Command Pattern implementations
behind the click entry point in cli_main.
"""

from .display import console, display_feature_states, err_console, handle_main_error
from .validators import check_privileges, validate_target_file

__all__ = [
    "check_privileges",
    "console",
    "display_feature_states",
    "err_console",
    "handle_main_error",
    "validate_target_file",
]
