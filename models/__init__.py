from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

# Re-export common models for convenience
from .user import User  # noqa: F401,E402
from .vendor import VendorProfile  # noqa: F401,E402
