"""
Application Layer - Ports vers les capacites externes.
"""
