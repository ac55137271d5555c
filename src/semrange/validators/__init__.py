"""Schema validation for constraints documents."""
