"""
Core distance math and reporting shared by the tabletop client and the distance service.
"""
