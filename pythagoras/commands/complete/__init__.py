from .entry import complete_command

__all__ = ['complete_command']
