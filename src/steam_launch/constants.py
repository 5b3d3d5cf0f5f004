"""Fixed identifiers for the single game this launcher manages."""

#: Steam application ID of Running with Rifles.
RWR_APP_ID = 270150

#: Display name used in log and CLI messages.
RWR_GAME_NAME = "Running with Rifles"

#: URI scheme registered by the Steam client.
STEAM_SCHEME = "steam"

#: Directory (relative to a library root) holding app manifests.
STEAMAPPS_DIR = "steamapps"

#: Secondary-library declaration file inside ``steamapps``.
LIBRARY_FOLDERS_FILE = "libraryfolders.vdf"
