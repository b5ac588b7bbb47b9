# Keyword dictionaries for the chat search box. Keys are members of the
# closed service/region sets; order matters for tie-breaks (first wins).
SERVICE_KEYWORDS = {
    "Plumbing": [
        "plumbing", "plumber", "hot water", "water heater", "leak", "leaking", "toilet",
        "drain", "blocked drain", "pipe", "burst pipe", "gas fitter", "shower",
    ],
    "Electrical": [
        "electrical", "electrician", "sparky", "wiring", "power point", "powerpoint", "switchboard",
        "lights", "lighting", "fuse", "circuit breaker", "safety switch",
    ],
    "Carpentry": [
        "carpentry", "carpenter", "chippy", "deck", "decking", "pergola", "cabinet", "framing",
        "timber", "skirting",
    ],
    "Painting": [
        "painting", "painter", "paint", "repaint", "feature wall", "wallpaper", "render",
    ],
    "Landscaping": [
        "landscaping", "landscaper", "garden", "gardener", "lawn", "mowing", "turf", "hedge",
        "retaining wall", "irrigation",
    ],
    "Roofing": [
        "roofing", "roofer", "roof", "gutter", "guttering", "downpipe", "tiles", "roof leak",
        "colorbond", "skylight",
    ],
}

REGION_KEYWORDS = {
    "Northern Beaches, NSW": [
        "northern beaches", "manly", "dee why", "brookvale", "mona vale", "narrabeen",
        "collaroy", "avalon", "freshwater", "curl curl", "frenchs forest", "newport", "palm beach",
    ],
    "Brisbane, QLD": [
        "brisbane", "brissie", "fortitude valley", "south bank", "west end", "new farm",
        "chermside", "indooroopilly", "toowong", "carindale", "qld", "queensland",
    ],
}
