"""
services/ - Business Layer
===========================
IP lookup and random number generation, independent of Telegram.
"""
