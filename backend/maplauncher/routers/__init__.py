"""Map Launcher Routers"""
