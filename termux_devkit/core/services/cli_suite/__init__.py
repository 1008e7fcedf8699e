"""
CLI suite installation service — native install with proot fallback.
"""

from termux_devkit.core.services.cli_suite.installer import (  # noqa: F401
    CliSuiteInstaller,
    CliSuiteResults,
    install_cli_suite,
)
from termux_devkit.core.services.cli_suite.tools import (  # noqa: F401
    CLI_TOOLS,
    SPECIAL_INSTALLERS,
    CliTool,
)
