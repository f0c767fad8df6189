from .css_colors import CSS_COLORS

__all__ = ['CSS_COLORS']
