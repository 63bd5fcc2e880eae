"""HTTP plumbing shared by the feature routers."""

from .errors import install_error_handlers, parse_payload

__all__ = ["install_error_handlers", "parse_payload"]
