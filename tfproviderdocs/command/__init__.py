"""Command-line interface for running documentation checks."""