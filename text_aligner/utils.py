"""
Utility functions for the text aligner.
"""

from .config import AlignerConfig


def build_config_from_args(args):
    """Build AlignerConfig from an argparse Namespace.

    Options left unset on the command line keep the config defaults.
    """
    config = {
        "max_lines": getattr(args, "max_lines", None),
        "max_line_length": getattr(args, "max_line_length", None),
        "report_level": getattr(args, "level", None),
    }

    # Remove None values to avoid overriding defaults
    config = {k: v for k, v in config.items() if v is not None}
    return AlignerConfig(**config)
