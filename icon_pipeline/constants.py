"""
constants.py
--------------------
Shared constants for the icon pipeline:
  - manifest schema version and publisher keys
  - the twenty categories and their labels
  - categorization tables (name overrides, ordered keyword pairs)
  - vendor taxonomy maps (Tabler, Phosphor, Remix Icon, Material Design Icons)
  - style suffixes and SVG cleaning patterns
"""

import re

MANIFEST_VERSION = 3

# Key-value store keys and object-storage content type used by the publisher
MANIFEST_KV_KEY = "icon-manifest"
LIBRARIES_KV_KEY = "icon-libraries"
SVG_CONTENT_TYPE = "image/svg+xml"

MANIFEST_FILENAME = "manifest.json"
LIBRARIES_FILENAME = "libraries.json"
REPORT_FILENAME = "report.json"

DEFAULT_UPLOAD_CONCURRENCY = 15

# Categories

# (id, label) in declaration order; this order is also the keyword scan order.
CATEGORIES: list[tuple[str, str]] = [
    ("arrows",         "Arrows & Chevrons"),
    ("navigation",     "Navigation & Layout"),
    ("datetime",       "Date & Time"),
    ("files",          "Files & Folders"),
    ("communication",  "Communication"),
    ("media",          "Media & Audio"),
    ("people",         "People & Users"),
    ("commerce",       "Commerce & Finance"),
    ("security",       "Security & Privacy"),
    ("controls",       "Settings & Controls"),
    ("infrastructure", "Infrastructure & Data"),
    ("actions",        "Actions & Favorites"),
    ("notifications",  "Notifications & Alerts"),
    ("location",       "Location & Maps"),
    ("visual",         "Images & Video"),
    ("development",    "Development & Code"),
    ("weather",        "Weather & Nature"),
    ("shapes",         "Shapes & Symbols"),
    ("text",           "Text & Typography"),
    ("misc",           "Miscellaneous"),
]

CATEGORY_IDS: frozenset[str] = frozenset(cat_id for cat_id, _ in CATEGORIES)
CATEGORY_LABELS: dict[str, str] = dict(CATEGORIES)
DEFAULT_CATEGORY = "misc"

# Categorization tables

# Exact icon names whose keywords would otherwise land in the wrong category.
# Checked before any keyword matching.
NAME_OVERRIDES: dict[str, str] = {
    # start with "cloud" but aren't weather
    "cloud-download":      "infrastructure",
    "cloud-upload":        "infrastructure",
    "cloud-off":           "infrastructure",
    "cloud-cog":           "infrastructure",
    "cloud":               "infrastructure",
    # "eye" could be people or actions
    "eye":                 "actions",
    "eye-off":             "actions",
    # "scan" could be security or visual
    "scan-face":           "security",
    "scan-line":           "security",
    "scan-barcode":        "commerce",
    "scan-text":           "text",
    "scan-search":         "actions",
    "scan-eye":            "security",
    # navigation vs location
    "navigation":          "location",
    "navigation-2":        "location",
    "navigation-off":      "location",
    "share":               "communication",
    "share-2":             "communication",
    "pin":                 "location",
    "pin-off":             "location",
    "monitor":             "infrastructure",
    "monitor-check":       "infrastructure",
    "monitor-dot":         "infrastructure",
    "monitor-down":        "infrastructure",
    "monitor-off":         "infrastructure",
    "monitor-pause":       "infrastructure",
    "monitor-play":        "infrastructure",
    "monitor-smartphone":  "infrastructure",
    "monitor-speaker":     "infrastructure",
    "monitor-stop":        "infrastructure",
    "monitor-up":          "infrastructure",
    "monitor-x":           "infrastructure",
    # box is files, not shapes
    "box":                 "files",
    "boxes":               "files",
    # flag is actions, not location
    "flag":                "actions",
    "flag-off":            "actions",
    "flag-triangle-left":  "actions",
    "flag-triangle-right": "actions",
}

# Keywords per category in declaration order; more specific keywords first.
_KEYWORDS_BY_CATEGORY: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("arrows", (
        "arrow", "chevron", "caret", "move-", "corner-", "maximize", "minimize",
        "expand", "shrink", "fold", "unfold", "between", "iterate", "repeat",
        "undo", "redo", "rotate", "flip", "refresh", "replace", "swap",
        "merge", "split", "return", "forward", "backward",
    )),
    ("navigation", (
        "home", "house", "menu", "sidebar", "layout", "grid", "list", "panel",
        "columns", "rows", "table", "kanban", "dock", "app-window",
        "navigation", "breadcrumb", "pagination", "tab", "gallery", "scroll",
        "separator", "grip", "between-", "ellipsis", "more-horizontal",
        "more-vertical", "anchor", "loader", "layers", "form-input",
    )),
    ("datetime", (
        "calendar", "clock", "timer", "watch", "hourglass", "alarm",
        "schedule", "stopwatch", "history", "time",
    )),
    ("files", (
        "file", "folder", "document", "copy", "clipboard", "paste",
        "notebook", "book", "archive", "package", "box", "save",
        "download", "upload", "import", "export", "attachment",
    )),
    ("communication", (
        "mail", "message", "phone", "chat", "send", "inbox", "contact",
        "at-sign", "reply", "voicemail", "satellite", "radio", "rss",
        "share", "megaphone", "speech", "conversation", "comment",
    )),
    ("media", (
        "play", "pause", "stop", "volume", "music", "mic", "headphone",
        "speaker", "audio", "podcast", "disc", "vinyl", "guitar",
        "drum", "piano", "amp", "equalizer", "fast-forward", "rewind",
        "skip", "shuffle", "repeat", "cassette", "gamepad", "joystick",
        "chess",
    )),
    ("people", (
        "user", "users", "person", "baby", "accessibility", "hand",
        "thumbs", "brain", "head", "footprints", "figure", "body",
        "bone", "ear", "eye-", "glasses", "smile", "frown", "meh",
        "angry", "annoyed", "laugh", "drama",
    )),
    ("commerce", (
        "cart", "bag", "credit-card", "dollar", "wallet", "receipt",
        "banknote", "coin", "currency", "bitcoin", "store", "shop",
        "tag", "barcode", "price", "percent", "badge-", "ticket",
        "gift", "piggy", "landmark", "building", "calculator", "tally",
        "scale", "school",
    )),
    ("security", (
        "lock", "key", "shield", "scan", "fingerprint", "guard",
        "keyhole", "unlock", "vault",
    )),
    ("controls", (
        "settings", "sliders", "toggle", "tool", "wrench", "hammer",
        "screwdriver", "nut", "bolt", "cog", "gear", "filter",
        "sort", "adjust", "configure", "switch", "power",
        "plug", "socket", "cable", "usb", "bluetooth", "wifi", "nfc",
        "signal", "antenna", "gauge", "touchpad", "fan",
    )),
    ("infrastructure", (
        "cloud", "database", "server", "hard-drive", "cpu", "memory",
        "network", "container", "blocks", "workflow", "circuit",
        "binary", "ethernet", "router", "monitor", "screen", "laptop",
        "tablet", "smartphone", "desktop", "printer", "keyboard",
        "mouse", "computer", "display", "chart", "bar-chart", "line-chart",
        "area-chart", "pie-chart", "gantt-chart", "scatter-chart",
        "candlestick-chart", "trending", "tv",
    )),
    ("actions", (
        "heart", "star", "bookmark", "thumb", "flag", "pin",
        "like", "check", "plus", "minus", "x", "close", "delete",
        "trash", "remove", "add", "create", "edit", "pencil", "pen",
        "eraser", "scissors", "crop", "cut", "zap", "sparkle",
        "wand", "magic", "search", "zoom", "eye", "lightbulb", "lasso",
        "link", "rocket", "verified", "medal", "ribbon", "inspect",
        "grab", "crosshair", "cross",
    )),
    ("notifications", (
        "alert", "bell", "info", "warning", "siren", "megaphone",
        "help-circle", "badge", "notification", "announce", "circle-alert",
        "triangle-alert", "octagon-alert",
    )),
    ("location", (
        "map", "pin", "globe", "compass", "navigation", "route",
        "locate", "gps", "waypoint", "milestone", "sign-post", "signpost",
        "mountain", "tent", "tree", "flower", "leaf",
        "train", "bus", "car", "plane", "bike", "motorbike", "scooter",
        "tractor", "tram", "ship", "sail", "rail", "fuel", "parking",
        "ferry", "truck",
    )),
    ("visual", (
        "image", "camera", "video", "film", "photo", "picture",
        "aperture", "focus", "frame", "gallery", "canvas",
        "projector", "presentation", "screenshot",
        "paintbrush", "paint", "palette", "spray-can", "sticker",
        "drone", "feather",
    )),
    ("development", (
        "code", "terminal", "git", "bug", "bracket", "braces",
        "regex", "variable", "function", "webhook", "api",
        "component", "puzzle", "block", "atom", "test-tube",
    )),
    ("weather", (
        "sun", "moon", "cloud-rain", "cloud-snow", "cloud-lightning",
        "cloud-drizzle", "cloud-hail", "cloud-fog", "wind", "rainbow",
        "snowflake", "thermometer", "umbrella", "tornado", "sunrise",
        "sunset", "eclipse", "droplet", "wave", "flame", "fire",
        "haze", "shrub",
    )),
    ("shapes", (
        "circle", "square", "triangle", "hexagon", "octagon", "pentagon",
        "diamond", "rectangle", "oval", "cylinder", "cone", "cube",
        "pyramid", "sphere", "torus", "shape", "infinity", "sigma",
        "slash", "scaling", "origami",
    )),
    ("text", (
        "type", "text", "bold", "italic", "font", "underline",
        "strikethrough", "heading", "paragraph", "quote", "list",
        "indent", "align-", "subscript", "superscript", "case",
        "spell", "whole-word", "pilcrow", "baseline", "wrap",
        "a-arrow", "a-large", "remove-formatting", "languages",
        "subtitles", "outdent",
    )),
)

# Flattened (category, keyword) pairs, scanned front to back; first match wins.
CATEGORY_KEYWORDS: list[tuple[str, str]] = [
    (category, keyword)
    for category, keywords in _KEYWORDS_BY_CATEGORY
    for keyword in keywords
]

# Vendor taxonomy maps

# Tabler's 41 categories → local category
TABLER_CATEGORY_MAP: dict[str, str] = {
    "Animals":         "misc",
    "Arrows":          "arrows",
    "Badges":          "actions",
    "Brand":           "misc",
    "Buildings":       "commerce",
    "Charts":          "infrastructure",
    "Communication":   "communication",
    "Computers":       "infrastructure",
    "Currencies":      "commerce",
    "Database":        "infrastructure",
    "Design":          "visual",
    "Development":     "development",
    "Devices":         "infrastructure",
    "Document":        "files",
    "E-commerce":      "commerce",
    "Electrical":      "controls",
    "Extensions":      "development",
    "Food":            "misc",
    "Games":           "misc",
    "Gender":          "people",
    "Gestures":        "people",
    "Health":          "people",
    "Laundry":         "misc",
    "Letters":         "text",
    "Logic":           "development",
    "Map":             "location",
    "Math":            "shapes",
    "Media":           "media",
    "Mood":            "people",
    "Nature":          "weather",
    "Numbers":         "text",
    "Photography":     "visual",
    "Shapes":          "shapes",
    "Sport":           "misc",
    "Symbols":         "shapes",
    "System":          "controls",
    "Text":            "text",
    "Vehicles":        "location",
    "Version control": "development",
    "Weather":         "weather",
    "Zodiac":          "misc",
}

# Phosphor's 18 categories → local category
PHOSPHOR_CATEGORY_MAP: dict[str, str] = {
    "arrows":                   "arrows",
    "brands":                   "misc",
    "commerce":                 "commerce",
    "communications":           "communication",
    "design":                   "visual",
    "editor":                   "text",
    "finances":                 "commerce",
    "games":                    "misc",
    "health & wellness":        "people",
    "maps & travel":            "location",
    "media":                    "media",
    "nature":                   "weather",
    "objects":                  "misc",
    "office":                   "files",
    "people":                   "people",
    "system":                   "controls",
    "technology & development": "development",
    "weather":                  "weather",
}

# Remix Icon directory categories → local category.
# "Others" and "Food" are left out so those icons fall through to keywords.
REMIX_CATEGORY_MAP: dict[str, str] = {
    "Arrows":           "arrows",
    "Buildings":        "commerce",
    "Business":         "commerce",
    "Communication":    "communication",
    "Design":           "visual",
    "Development":      "development",
    "Device":           "infrastructure",
    "Document":         "files",
    "Editor":           "text",
    "Finance":          "commerce",
    "Health & Medical": "people",
    "Map":              "location",
    "Media":            "media",
    "System":           "controls",
    "User & Faces":     "people",
    "Weather":          "weather",
}
REMIX_BRAND_CATEGORY = "Logos"

# Material Design Icons tag taxonomy → local category
MDI_TAG_MAP: dict[str, str] = {
    "Account / User":                "people",
    "Alpha / Numeric":               "text",
    "Arrow":                         "arrows",
    "Audio":                         "media",
    "Automotive":                    "location",
    "Banking":                       "commerce",
    "Cellphone / Phone":             "communication",
    "Cloud":                         "infrastructure",
    "Currency":                      "commerce",
    "Database":                      "infrastructure",
    "Date / Time":                   "datetime",
    "Developer / Languages":         "development",
    "Device / Tech":                 "infrastructure",
    "Drawing / Art":                 "visual",
    "Edit / Modify":                 "actions",
    "Emoji":                         "people",
    "Files / Folders":               "files",
    "Form":                          "navigation",
    "Geographic Information System": "location",
    "Hardware / Tools":              "controls",
    "Lock":                          "security",
    "Math":                          "shapes",
    "Music":                         "media",
    "Nature":                        "weather",
    "Navigation":                    "navigation",
    "Notification":                  "notifications",
    "People / Family":               "people",
    "Photography":                   "visual",
    "Places":                        "location",
    "Settings":                      "controls",
    "Shape":                         "shapes",
    "Shopping":                      "commerce",
    "Text / Content / Format":       "text",
    "Transportation + Flying":       "location",
    "Transportation + Other":        "location",
    "Transportation + Road":         "location",
    "Transportation + Water":        "location",
    "Video / Movie":                 "visual",
    "View":                          "navigation",
    "Weather":                       "weather",
}
MDI_BRAND_TAG = "Brand / Logo"

# Style suffixes

# Filename suffixes that mark a style variant rather than part of the icon name
STYLE_SUFFIXES: tuple[str, ...] = (
    "-outline",
    "-fill",
    "-line",
    "-sharp",
    "-bold",
    "_24_regular",
    "_24_filled",
)

# SVG cleaning

# Ordered list of (compiled regex, replacement) applied to every copied SVG
_CLEAN_PATTERNS: list[tuple[re.Pattern, str]] = [
    # XML / HTML comments, including license banners, plus one trailing newline
    (re.compile(r"<!--[\s\S]*?-->\n?"), ""),
]
