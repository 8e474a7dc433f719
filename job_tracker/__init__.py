"""
Job Tracker API
===============

HTTP service for recording companies and querying them by name, country
and open position.
"""
