"""Runtime settings for qubit_field, overridable through environment variables."""

import os

# Logging
LOG_LEVEL = os.getenv("QUBIT_FIELD_LOG_LEVEL", "WARNING")
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Normalization tolerance used by State.check_normalized and Circuit.run
NORM_TOL = float(os.getenv("QUBIT_FIELD_NORM_TOL", "1e-9"))

# Field limits
MAX_NODES = int(os.getenv("QUBIT_FIELD_MAX_NODES", "20"))
MAX_LABEL_LENGTH = int(os.getenv("QUBIT_FIELD_MAX_LABEL_LENGTH", "20"))
DEFAULT_LINK_STRENGTH = 0.5
