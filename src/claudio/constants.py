"""Shared constants for claudio."""

BOLD = "\033[1m"
GREEN = "\033[32m"
CYAN = "\033[36m"
DIM = "\033[2m"
RESET = "\033[0m"

PROG = "claudio"

DEFAULT_TARGET_PROGRAM = "claude"
DEFAULT_INVENTORY_PROGRAM = "lms"
INVENTORY_ARGS = ("ls", "--llm", "--json")

DEFAULT_BASE_URL = "http://localhost:1234"
DEFAULT_AUTH_TOKEN = "lmstudio"
ENV_DEFAULTS = {
    "ANTHROPIC_BASE_URL": DEFAULT_BASE_URL,
    "ANTHROPIC_AUTH_TOKEN": DEFAULT_AUTH_TOKEN,
}

MODEL_FLAG = "--model"
PRINT_FLAGS = frozenset({"-p", "--print"})
HELP_FLAGS = frozenset({"-h", "--help", "-v", "--version"})
END_OF_FLAGS = "--"

# Subcommands of the target program that never open a chat session.
NON_SESSION_COMMANDS = frozenset(
    {"doctor", "install", "mcp", "plugin", "setup-token", "update", "help"}
)

PICKER_PROMPT = "Select a model for Claude Code"

EXIT_FAILURE = 1
EXIT_NEEDS_MODEL = 2
FALLBACK_EXIT_CODE = 1
