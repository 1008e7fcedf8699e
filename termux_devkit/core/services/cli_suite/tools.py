"""
L0 Data — CLI tools installed by the suite installer.

npm tools try a native Termux install first and fall back to the
proot Ubuntu container. Special installers use their vendor's curl
script and have no fallback.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict


class CliTool(BaseModel):
    """One installable command-line tool."""

    model_config = ConfigDict(frozen=True)

    name: str
    install_cmd: str
    verify_cmd: str
    description: str = ""
    requires_api_key: bool = False
    api_key_var: str = ""
    install_method: Literal["npm", "curl"] = "npm"


CLI_TOOLS: list[CliTool] = [
    CliTool(
        name="claude-code",
        install_cmd="npm install -g @anthropic-ai/claude-code",
        verify_cmd="claude --version",
        description="Anthropic Claude Code - Agentic coding assistant",
        requires_api_key=True,
        api_key_var="ANTHROPIC_API_KEY",
    ),
    CliTool(
        name="gemini-cli",
        install_cmd="npm install -g @google/gemini-cli",
        verify_cmd="gemini --version",
        description="Google Gemini CLI - Terminal AI assistant",
        requires_api_key=True,
        api_key_var="GOOGLE_API_KEY",
    ),
    CliTool(
        name="codex",
        install_cmd="npm install -g @openai/codex",
        verify_cmd="codex --version",
        description="OpenAI Codex - AI coding agent",
        requires_api_key=True,
        api_key_var="OPENAI_API_KEY",
    ),
    CliTool(
        name="opencode",
        install_cmd="npm install -g opencode-ai",
        verify_cmd="opencode --version",
        description="OpenCode AI - Open source coding agent",
        requires_api_key=True,
        api_key_var="OPENAI_API_KEY",
    ),
]

SPECIAL_INSTALLERS: list[CliTool] = [
    CliTool(
        name="droid",
        install_cmd="curl -fsSL https://static.factory.ai/droid/install.sh | sh",
        verify_cmd="droid --version",
        description="Factory Droid - AI development agent",
        requires_api_key=True,
        api_key_var="FACTORY_API_KEY",
        install_method="curl",
    ),
]
