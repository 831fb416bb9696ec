"""
Application routes package.

Contains all endpoint blueprints for the uploader.
"""

from application.routes.system import system_bp
from application.routes.upload import upload_bp

__all__ = ["system_bp", "upload_bp"]
