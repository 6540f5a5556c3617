# Playlist Manager: interactive console manager for in-memory song playlists
# Package: playlist_manager

__version__ = "1.0.0"
__author__ = "Playlist Manager Contributors"
__description__ = "Line-oriented console manager for named song playlists"

# Module structure:
#   - playlist_manager.library : Song, Playlist and search predicates
#   - playlist_manager.store   : Playlist store and domain errors
#   - playlist_manager.menu    : Text menu loop
#   - playlist_manager.config  : Configuration management
#   - playlist_manager.cli     : Process entrypoint
