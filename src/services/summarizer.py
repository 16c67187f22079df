from typing import List
from src.config import settings
from src.models.summary import Summary
from src.utils.logger import logger

SENTENCE_DELIMITER = ". "

def split_sentences(text: str, min_length: int = None) -> List[str]:
    """Split on the literal ". " and keep pieces longer than min_length characters."""
    if min_length is None:
        min_length = settings.MIN_SENTENCE_LENGTH
    return [s for s in text.split(SENTENCE_DELIMITER) if len(s) > min_length]

class SummarizerService:
    """Extractive summary by fixed-position sampling.

    Takes the first ``head_size`` sentences, every ``stride``-th sentence
    starting at ``head_size``, and the last ``tail_size`` sentences, dropping
    repeats while keeping the order in which each sentence first appears.
    No scoring is involved, so the output is a pure function of the text.
    """

    def __init__(
        self,
        min_sentence_length: int = None,
        min_sentences: int = None,
        head_size: int = None,
        stride: int = None,
        tail_size: int = None,
    ):
        self.min_sentence_length = settings.MIN_SENTENCE_LENGTH if min_sentence_length is None else min_sentence_length
        self.min_sentences = settings.MIN_SUMMARY_SENTENCES if min_sentences is None else min_sentences
        self.head_size = settings.SUMMARY_HEAD_SIZE if head_size is None else head_size
        self.stride = settings.SUMMARY_STRIDE if stride is None else stride
        self.tail_size = settings.SUMMARY_TAIL_SIZE if tail_size is None else tail_size
        if self.stride <= 0:
            raise ValueError(f"stride must be positive, got {self.stride}")

    def select_sentences(self, sentences: List[str]) -> List[str]:
        intro = sentences[:self.head_size]
        middle = sentences[self.head_size::self.stride]
        end = sentences[max(len(sentences) - self.tail_size, 0):]
        # dict keeps insertion order
        return list(dict.fromkeys(intro + middle + end))

    def summarize_text(self, full_text: str) -> str:
        sentences = split_sentences(full_text, self.min_sentence_length)

        if len(sentences) < self.min_sentences:
            logger.info(f"Short transcript ({len(sentences)} qualifying sentences). Returning them as-is.")
            return SENTENCE_DELIMITER.join(sentences)

        selected = self.select_sentences(sentences)
        logger.info(f"Selected {len(selected)} of {len(sentences)} sentences for summary.")
        return SENTENCE_DELIMITER.join(selected) + "."

    def summarize(self, full_text: str) -> Summary:
        return Summary(content=self.summarize_text(full_text))
