# LocalScribe - Local Speech-to-Text

"""
Offline transcription of short voice clips with whisper.cpp models
that are downloaded on demand instead of bundled with the application.
"""

__version__ = "0.1.0"
__app_name__ = "LocalScribe"
