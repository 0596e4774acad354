from rich.console import Console
from rich.markdown import Markdown

console = Console()


def show_help_with_markdown(ctx, param, value):
    """Custom help callback that renders help text using Rich markdown"""
    if not value or ctx.resilient_parsing:
        return

    markdown_help = """
# numcheck-bench - Number Verification Benchmark

Compares parse-and-catch, regex matching and `str.isdecimal()` for deciding
whether a string holds a non-negative integer.

## QUICK START EXAMPLES

```bash
numcheck benchmark run
numcheck benchmark run --operation is_number_with_regex --prefix X
numcheck benchmark run --value-count 100000 --report-format json
numcheck benchmark list
numcheck classify X42
numcheck config show --format yaml
```

## Options
- `--config, -c PATH`: Configuration file path
- `--verbose, -v`: Enable verbose logging
- `--debug`: Enable debug mode
- `--help`: Show this message and exit

## Commands
- benchmark  Benchmark commands.
- classify   Classify one string with every strategy.
- config     Configuration management commands.
"""

    console.print(Markdown(markdown_help))
    ctx.exit()
