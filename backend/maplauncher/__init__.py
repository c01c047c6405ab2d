"""Map Launcher - deep links into third-party map apps"""

__version__ = "0.1.0"
