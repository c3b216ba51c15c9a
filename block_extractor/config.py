"""Configuration and constants for the Block Extractor project."""

from dataclasses import dataclass


# Label resolution
# Text entities on this layer are scanned for the block title.
MARKER_LAYER = "block_title"
# Absolute per-axis tolerance for point equality
POINT_TOLERANCE = 1e-6


@dataclass(frozen=True)
class CommandMessages:
    """User-visible messages written to the host session."""
    boundary_prompt: str = "Select the boundary cube: "
    boundary_reject: str = "Selection must be a 3D Solid cube or prism."
    label_not_found: str = (
        "Error: Could not find title text on layer '{layer}' at the cube's corner."
    )
    duplicate_name: str = "Error: A block named '{name}' already exists."
    success: str = "Block '{name}' created successfully."
    failure: str = "An error occurred while creating the block: {detail}"


MESSAGES = CommandMessages()


# Host command
COMMAND_NAME = "CreateBlockFromCube"

# Container holding the live scene
MODEL_SPACE = "*Model_Space"


# Logging
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"
