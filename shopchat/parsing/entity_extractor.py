from shopchat.parsing.lexicon import STOP_WORDS


def extract_entity_name(text: str) -> str:
    """
    Turn a question into a product search phrase by dropping stop-words.

    "how much does the Oslo jacket cost" -> "Oslo jacket"
    """
    words = (text or "").split()
    kept = [word for word in words if word.lower() not in STOP_WORDS]
    return " ".join(kept).strip()
