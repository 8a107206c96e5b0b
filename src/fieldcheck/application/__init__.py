"""Application layer: validators and reporters."""
