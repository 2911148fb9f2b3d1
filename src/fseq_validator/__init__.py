"""
FSEQ Validator
==============

Pre-playback validation of FSEQ v2 light-show sequence files.

This package checks that an uncompressed 48-channel sequence fits the
fixed capabilities of the embedded show controller. It parses the binary
header, decodes every frame into channel group states and counts the
group changes the controller will have to store as commands.

Components:
    - fseq: Binary reader, header parser and frame decoder
    - signals: Rolling command counter
    - validator: Orchestration and threshold checks
    - messages: Human-readable rendering of validation errors
    - cli / main: Command-line and HTTP entry points

Example:
    from fseq_validator.validator import validate

    with open("lightshow.fseq", "rb") as f:
        result = validate(f.read())

    if not result.is_valid:
        print(result.errors)
"""

__version__ = "0.1.0"
__author__ = "FSEQ Validator Project"

__all__ = [
    "__version__",
]
