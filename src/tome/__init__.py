"""
tome - run a directory of scripts as subcommands

Maps command-line arguments onto executables under a root directory,
runs pre-execution hooks, and hands the process over to the script.
"""

__version__ = "0.9.0"
__all__ = ["__version__"]
