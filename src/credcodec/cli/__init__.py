"""
Command-line interface for credcodec.
"""
