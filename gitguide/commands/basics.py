"""
help / clear - Interpreter built-ins.
"""

from gitguide.context import CommandContext

# (usage, description) in display order
COMMANDS = [
    ("help", "Show available commands"),
    ("clear", "Clear the terminal"),
    ("touch <file>", "Create a new file"),
    ("edit <file>", "Edit an existing file"),
    ("git clone <url>", "Clone a repository"),
    ("git status", "Show working tree status"),
    ("git add <file> | .", "Add file(s) to staging"),
    ('git commit -m "message"', "Record changes to repository"),
    ("git push", "Push commits to remote"),
    ("git pull", "Fetch changes from remote"),
    ("git log", "Show commit history"),
    ("git diff [--staged] [file]", "Show changes"),
    ("git reset HEAD <file>", "Unstage a file"),
    ("git reset --soft HEAD~1", "Undo the last commit"),
    ("git checkout -- <file>", "Discard changes to a file"),
    ("git checkout [-b] <branch>", "Switch (or create) a branch"),
    ("git branch [-d] [name]", "List, create, or delete branches"),
    ('gh pr create --title "t"', "Open a pull request"),
    ("gh pr merge <number>", "Merge a pull request"),
    ("gh pr list", "List pull requests"),
    ("gh repo view", "Show the remote repository"),
]

USAGE_WIDTH = 30


def cmd_help(args: list[str], ctx: CommandContext) -> int:
    out = ctx.out
    out.output("Available commands:")
    out.output("")
    for usage, description in COMMANDS:
        out.output(f"  {usage:<{USAGE_WIDTH}} {description}")
    out.output("")
    out.output(f"Try: git clone {ctx.config.remote_url}")
    return 0


def cmd_clear(args: list[str], ctx: CommandContext) -> int:
    ctx.out.clear()
    return 0
