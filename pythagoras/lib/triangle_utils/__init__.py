from .general_utils import log, handle_error

__all__ = ['log', 'handle_error']
