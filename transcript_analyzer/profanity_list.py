"""Built-in profanity word list (lowercase, exact-match)."""

DEFAULT_PROFANITY = [
    "arse",
    "arsehole",
    "ass",
    "asshole",
    "bastard",
    "bitch",
    "bloody",
    "bollocks",
    "bullshit",
    "crap",
    "damn",
    "damned",
    "dammit",
    "dick",
    "douche",
    "fuck",
    "fucked",
    "fucker",
    "fucking",
    "goddamn",
    "hell",
    "jackass",
    "motherfucker",
    "piss",
    "pissed",
    "prick",
    "shit",
    "shitty",
    "slut",
    "twat",
    "wanker",
]
