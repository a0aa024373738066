from .orders import request_validation_error_handler, router

__all__ = ["request_validation_error_handler", "router"]
