"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "typename-tagger.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Configuration template for typename-tagger.
# Replace every <REQUIRED> placeholder before running annotate.
# Remove or fill <OPTIONAL> sections only when your fixtures need them.

schema:
  # Provide either inline GraphQL SDL or a path relative to this file.
  path: "<REQUIRED>"
  # inline: |
  #   type Query { ... }

# Field presence rules for interfaces and unions. For each abstract type,
# list its object types in priority order with the fields that identify them.
# resolvers:
#   <OPTIONAL>:
#     <OPTIONAL>:
#       - "<OPTIONAL>"

# Parent context used when the fixture root carries no __typename.
# Set both keys or neither.
# root:
#   parent_type: "<OPTIONAL>"
#   property: "<OPTIONAL>"

output:
  indent: 2
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with placeholders and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
