"""
Action group handlers that let a Bedrock agent answer Active Directory
administration questions through SSM Run Command or the Directory Service
Data API.
"""

__version__ = "1.0.0"
