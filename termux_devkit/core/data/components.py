"""
L0 Data — built-in component catalogue.

Each entry is one installable step of the Termux development setup.
``EXECUTION_ORDER`` is the canonical installation sequence; it must be a
valid topological order of the dependency graph declared below (the
registry refuses to build otherwise).
"""

from __future__ import annotations

from termux_devkit.core.models.component import Component

COMPONENTS: list[Component] = [
    Component(
        id="termux-prep",
        name="Termux Preparation",
        description="Environment detection, storage permissions, PATH configuration",
        script="prepare-termux.sh",
        estimated_time="30 seconds",
    ),
    Component(
        id="prerequisites",
        name="Prerequisites",
        description="Install nodejs, npm, git, openssh, curl, python",
        script="install-prereqs.sh",
        estimated_time="2-3 minutes",
        dependencies=("termux-prep",),
    ),
    Component(
        id="proot-setup",
        name="Proot-Distro Setup",
        description="Ubuntu container for tools incompatible with Termux",
        script="setup-proot.sh",
        estimated_time="3-5 minutes",
        dependencies=("prerequisites",),
    ),
    Component(
        id="cli-tools",
        name="CLI Tools Installation",
        description="Install development CLIs with automatic fallback",
        script="install-cli-suite.js",
        estimated_time="2-4 minutes",
        dependencies=("prerequisites",),
    ),
    Component(
        id="shim-generation",
        name="Command Shim Generation",
        description="Seamless access to proot-installed tools",
        script="generate-shims.js",
        estimated_time="10 seconds",
        dependencies=("proot-setup", "cli-tools"),
        auto_select=True,
    ),
    Component(
        id="github-setup",
        name="GitHub Automation",
        description="SSH key generation, authentication, git config",
        script="setup-github.js",
        estimated_time="1-2 minutes",
        dependencies=("prerequisites",),
    ),
    Component(
        id="repo-cloning",
        name="Repository Cloning",
        description="Clone project repository to ~/projects",
        script="clone-repo.js",
        estimated_time="1-2 minutes",
        dependencies=("github-setup",),
    ),
    Component(
        id="shell-customization",
        name="Shell Customization",
        description="Helpful aliases, git-aware PS1 prompt",
        script="apply-shell-config.sh",
        estimated_time="10 seconds",
        dependencies=("termux-prep",),
    ),
    Component(
        id="verification",
        name="Verification",
        description="Comprehensive health checks for installed components",
        script="verify-installation.sh",
        estimated_time="30 seconds",
    ),
    Component(
        id="uninstallation",
        name="Uninstallation",
        description="Complete removal of all installed components",
        script="uninstall.sh",
        estimated_time="1-2 minutes",
        standalone=True,
    ),
]

EXECUTION_ORDER: list[str] = [
    "termux-prep",
    "prerequisites",
    "proot-setup",
    "cli-tools",
    "shim-generation",
    "github-setup",
    "repo-cloning",
    "shell-customization",
    "verification",
    "uninstallation",
]
