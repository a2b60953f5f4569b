import re

TAG_RE = re.compile(r"<[^>]*>")
WHITESPACE_RE = re.compile(r"\s+")
SENTENCE_END_RE = re.compile(r"[.!?]+")

# Only these five are decoded; anything else stays as written
ENTITIES = (
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
)

MAX_SUMMARY_LENGTH = 150
MIN_WORD_BREAK = 100


def clean_text(text):
    text = TAG_RE.sub(" ", text)
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return WHITESPACE_RE.sub(" ", text).strip()


def extract_short_summary(text):
    """
    Reduce an HTML store description to its leading sentence.

    Long sentences are cut at 150 characters, backing up to the last space
    past index 100 when there is one, and end in "...". A sentence that was
    followed by a terminator in the source keeps a single trailing period.
    """
    if not text:
        return ""

    sentences = SENTENCE_END_RE.split(clean_text(text))
    first = sentences[0].strip()

    if len(first) > MAX_SUMMARY_LENGTH:
        cut = first[:MAX_SUMMARY_LENGTH]
        last_space = cut.rfind(" ")
        if last_space > MIN_WORD_BREAK:
            cut = cut[:last_space]
        return cut + "..."

    if first and len(sentences) > 1:
        first += "."
    return first
