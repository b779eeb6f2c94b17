"""parabens.vc: personalized greeting pages, shortlinks and social-preview images"""

__version__ = '1.0.0'
