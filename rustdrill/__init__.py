"""Status lines, rust-project.json generation and worked drill solutions for compiler exercises."""

__version__ = "0.1.0"