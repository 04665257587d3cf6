"""
Web API for the Round Robin simulator
"""
