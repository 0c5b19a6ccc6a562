"""ID generators."""

import uuid


def generate_uuid() -> str:
    """Generate a random (version 4) UUID in canonical string form.

    Returns:
        A new UUID string, e.g. '0b6c9d1e-...'.
    """
    return str(uuid.uuid4())
