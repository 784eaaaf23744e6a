"""CLI output utilities and formatting."""

from colorama import Fore, Style

BANNER = f"""
{Fore.YELLOW}╔════════════════════════════════════════════════╗{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.CYAN}{Style.BRIGHT}gitinternals{Style.RESET_ALL}                                 {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}║{Style.RESET_ALL}   {Fore.WHITE}Read-only Git object store inspector{Style.RESET_ALL}         {Fore.YELLOW}║{Style.RESET_ALL}
{Fore.YELLOW}╚════════════════════════════════════════════════╝{Style.RESET_ALL}
"""


def error(message: str) -> str:
    """Format error message in red."""
    return f"{Fore.RED}✗ {message}{Style.RESET_ALL}"


def heading(message: str) -> str:
    """Format an object heading such as *COMMIT*."""
    return f"{Style.BRIGHT}{message}{Style.RESET_ALL}"


def digest(value: str) -> str:
    """Format a digest in yellow."""
    return f"{Fore.YELLOW}{value}{Style.RESET_ALL}"
