"""livehook - desktop notifications for live stream webhooks"""
__version__ = "0.1.0"
