"""
Flask distance service.
"""
