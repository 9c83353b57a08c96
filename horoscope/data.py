from types import MappingProxyType

HOROSCOPES = MappingProxyType({
    "aries": "Today is a good day to assert yourself and take action.",
    "taurus": "Focus on stability and comfort today.",
    "gemini": "Communication is key today. Speak your mind.",
    "cancer": "Take care of your emotional well-being.",
    "leo": "Your charisma shines bright today!",
    "virgo": "Be detail-oriented and help others.",
    "libra": "Seek harmony in your relationships.",
    "scorpio": "You may feel intense—channel it wisely.",
    "sagittarius": "Explore something new today!",
    "capricorn": "Stay disciplined—progress is near.",
    "aquarius": "Innovate and break the mold.",
    "pisces": "Follow your intuition today.",
})


def lookup_horoscope(sign) -> str | None:
    return HOROSCOPES.get(str(sign).lower())
