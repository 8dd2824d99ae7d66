# Seedprep utilities
