"""
Template bank for offline roasts.

Templates are indexed by tone tier, then by library personality. Placeholders
use `{name}` syntax and are filled by `fallback.fill_template`.
"""

from steam_roast.core.models import PersonalityTag, Tier

PLACEHOLDERS = frozenset({
    "totalGames", "backlog", "totalTime", "mostPlayed", "mostPlayedTime",
    "mostPlayedPercent", "playedGames", "avgHours", "playedPercent", "unplayedPercent",
})

EMPTY_LIBRARY_ROAST = (
    "Zero games. An empty Steam library. Either you just made this account "
    "or you're the only person alive who reads the store page and walks away. "
    "Respect, honestly. 🫡"
)

# 🪶 Light: friendly teasing
LIGHT = {
    PersonalityTag.HYPERFOCUS: (
        "You've spent {mostPlayedTime} in {mostPlayed}. That's {mostPlayedPercent}% of all your playtime. "
        "The other {totalGames} games in your library would like a word... whenever you're free 😊",
        "{mostPlayed} for {mostPlayedTime}? That's not a game anymore, that's a second home. "
        "Maybe invite a few of your other games over sometime 🏡",
        "Loyalty award goes to you: {mostPlayedTime} of {mostPlayed}, {mostPlayedPercent}% of your whole gaming life. Cute, really 💕",
    ),
    PersonalityTag.COLLECTOR: (
        "{backlog} of your {totalGames} games are still waiting for their first hour. "
        "You're not a gamer, you're a curator 🖼️",
        "{unplayedPercent}% of your library is basically unopened gifts. "
        "Steam sales really see you coming, huh? 🎁",
    ),
    PersonalityTag.BUTTERFLY: (
        "An average of {avgHours} hours per game across {totalGames} games. "
        "You date your games, you don't marry them 🦋",
        "You've sampled {totalGames} games for about {avgHours} hours each. "
        "A true connoisseur of the first level 🍷",
    ),
    PersonalityTag.COMPLETIONIST: (
        "{playedPercent}% of your games actually played? Who raised you this well? "
        "{totalTime} well spent, probably 🏅",
        "{playedGames} out of {totalGames} games with real hours on them. "
        "Your backlog is tiny and honestly a bit suspicious 🕵️",
    ),
    PersonalityTag.CASUAL: (
        "{totalGames} games, {totalTime} of playtime, and {backlog} left for later. "
        "Perfectly balanced, as all things should be ⚖️",
        "{playedGames} played, {backlog} waiting, {mostPlayed} on top. "
        "Healthy, reasonable, mildly boring. We love that for you 🙂",
    ),
}

# 🌶️ Medium: sarcastic friend
MEDIUM = {
    PersonalityTag.HYPERFOCUS: (
        "{mostPlayedTime} in {mostPlayed}. {mostPlayedPercent}% of your entire playtime. "
        "You own {totalGames} games and play one. That's not a library, that's a shrine 🕯️",
        "You've given {mostPlayed} {mostPlayedTime} of your life. "
        "The rest of your library has filed a missing person report 🚨",
        "{mostPlayed}: {mostPlayedTime}. Everything else: a rounding error. "
        "At this point just uninstall Steam and run {mostPlayed} as your operating system 💻",
    ),
    PersonalityTag.COLLECTOR: (
        "{backlog} games you've never really played. {unplayedPercent}% of your library. "
        "You don't have a backlog, you have a digital storage unit 📦",
        "You own {totalGames} games and {backlog} of them have less than an hour. "
        "Gabe Newell thanks you for your donation 💸",
        "{unplayedPercent}% unplayed. Every Steam sale you buy hope, and every month you play {mostPlayed} instead 🛒",
    ),
    PersonalityTag.BUTTERFLY: (
        "{totalGames} games at {avgHours} hours each. You finish tutorials, not games 🦋",
        "Average playtime: {avgHours} hours. Your attention span has the lifespan of a free trial ⏳",
        "You've tried {totalGames} games and committed to none of them. "
        "Steam should list you as a professional demo tester 🎮",
    ),
    PersonalityTag.COMPLETIONIST: (
        "{playedPercent}% of your games played, {totalTime} total. "
        "Congratulations, you've turned a hobby into a second job 📋",
        "{playedGames} of {totalGames} games with real hours. "
        "You're the only person who treats a Steam sale like a commitment 💍",
    ),
    PersonalityTag.CASUAL: (
        "{totalTime} across {totalGames} games, {backlog} still shrink-wrapped. "
        "Not a gamer, not a collector, just... there 🤷",
        "{playedPercent}% played, {unplayedPercent}% not. "
        "Your library is the beige sedan of Steam accounts 🚗",
        "{mostPlayed} leads with {mostPlayedTime}, and nothing about this library is worth roasting harder. "
        "That's the roast 😐",
    ),
}

# 💀 Brutal: no mercy
BRUTAL = {
    PersonalityTag.HYPERFOCUS: (
        "{mostPlayedTime} in {mostPlayed}. {mostPlayedPercent}% of your gaming existence poured into one title. "
        "That's not dedication, that's a hostage situation, and you're both the captor and the victim ☠️",
        "You've spent {mostPlayedTime} in {mostPlayed} while {backlog} games rot in your library. "
        "Somewhere a therapist just felt a disturbance 🧠",
        "{mostPlayed}. {mostPlayedTime}. Think of the languages you could have learned. "
        "Think of the sunlight. You chose {mostPlayed} 🪦",
    ),
    PersonalityTag.COLLECTOR: (
        "{backlog} games. Never played. {unplayedPercent}% of {totalGames}. "
        "You're not building a library, you're funding Valve's retirement while your backlog writes its own obituary 💀",
        "{unplayedPercent}% of your library is untouched. "
        "You buy games the way other people buy gym memberships: as an apology to a future you that will never show up 🏚️",
    ),
    PersonalityTag.BUTTERFLY: (
        "{totalGames} games, {avgHours} hours each. "
        "You have the commitment of a goldfish and the wallet of someone who should know better 🐟",
        "An average of {avgHours} hours per game. "
        "You don't play games, you speed-run disappointment across {totalGames} titles 🔥",
    ),
    PersonalityTag.COMPLETIONIST: (
        "{playedPercent}% of your library played. {totalTime} gone. "
        "You didn't beat these games, they beat you into a lifestyle. Touch grass 🌱",
        "{playedGames} games with real hours, {totalTime} total. "
        "Your Steam profile is a confession, and the verdict is guilty 🔨",
        "{totalTime}. Read that again. {totalTime} across {playedGames} games. "
        "The achievement you're missing is 'Has Hobbies' 🏆",
    ),
    PersonalityTag.CASUAL: (
        "{totalGames} games, {totalTime} played, {backlog} ignored. "
        "You're not even bad at this in an interesting way. Mediocrity, fully achieved 🥱",
        "{playedPercent}% played, {mostPlayed} on top with {mostPlayedTime}. "
        "This library has the personality of a loading screen ⌛",
    ),
}

ROAST_TEMPLATES = {
    Tier.LIGHT: LIGHT,
    Tier.MEDIUM: MEDIUM,
    Tier.BRUTAL: BRUTAL,
}
