"""posix-lookup test suite"""
