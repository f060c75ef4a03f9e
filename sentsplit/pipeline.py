"""Batch pipeline: split every passage of a JSONL file."""

import json
import logging
from pathlib import Path
from typing import Optional

from tqdm import tqdm

from .config import Config
from .data import OutputWriter
from .exceptions import InvalidInputError
from .models import SplitResult, TranslationStatus
from .splitter import SentenceSplitter

logger = logging.getLogger(__name__)


def sentence_rows(passage_id: str, result: SplitResult, review_threshold: float) -> list[dict]:
    """Flatten a split result into one row per sentence."""
    return [
        {
            "passage_id": passage_id,
            "ordinal": sentence.ordinal,
            "text": sentence.text,
            "translation": sentence.translation,
            "word_count": sentence.word_count,
            "confidence": round(sentence.confidence, 4),
            "needs_review": sentence.needs_review(review_threshold),
            "issues": "; ".join(sentence.issues),
        }
        for sentence in result.sentences
    ]


def passage_row(
    passage_id: str,
    result: SplitResult,
    status: TranslationStatus,
    reliable_threshold: float,
) -> dict:
    """Summarize one passage and its translation status in a single row."""
    stats = result.stats()
    return {
        "passage_id": passage_id,
        "sentence_count": stats.sentence_count,
        "total_words": stats.total_words,
        "avg_words_per_sentence": stats.avg_words_per_sentence,
        "overall_confidence": round(result.overall_confidence, 4),
        "reliable": result.is_reliable(reliable_threshold),
        "warnings": " | ".join(result.warnings),
        "has_translation": status.has_translation,
        "source_sentences": status.sentence_counts.source,
        "translation_sentences": status.sentence_counts.translation,
        "alignment": status.alignment,
        "quality": status.quality,
        "needs_escalation": status.needs_escalation,
        "suspicion_score": status.suspicion_score,
        "signals": "; ".join(status.signals),
    }


class SplitPipeline:
    """Pipeline for splitting passages stored as JSONL records."""

    def __init__(self, config: Config):
        """Initialize split pipeline.

        Args:
            config: Pipeline configuration
        """
        self.config = config
        self.splitter = SentenceSplitter(config.splitter)

    def _output_paths(self) -> tuple[Path, Path]:
        """Return (sentences_path, passages_path) for the configured format."""
        suffix = self.config.output.format
        output_dir = self.config.output.output_dir
        return output_dir / f"sentences.{suffix}", output_dir / f"passages.{suffix}"

    def process_record(
        self, record: dict, line_num: int
    ) -> Optional[tuple[str, SplitResult, TranslationStatus]]:
        """Split one JSONL record.

        Args:
            record: Parsed JSON object
            line_num: Line number, used as id when the record has none

        Returns:
            (passage_id, result, status), or None if the record has no text
        """
        fields = self.config.input
        source_text = record.get(fields.text_field)
        if source_text is None:
            logger.warning(f"Line {line_num}: no '{fields.text_field}' field, skipping")
            return None
        translation_text = record.get(fields.translation_field)
        passage_id = str(record.get(fields.id_field, line_num))

        result = self.splitter.split(source_text, translation_text)
        status = self.splitter.analyze_translation(source_text, translation_text)
        return passage_id, result, status

    def process_file(self, input_path: Path) -> int:
        """Process a JSONL file and write sentence and passage tables.

        Args:
            input_path: Path to input JSONL file

        Returns:
            Number of passages processed
        """
        sentences_path, passages_path = self._output_paths()
        output_format = self.config.output.format
        splitter_config = self.config.splitter
        logger.info(f"Reading from: {input_path}")

        with open(input_path, "r", encoding="utf-8") as infile:
            lines = infile.readlines()

        passages_processed = 0
        with OutputWriter(sentences_path, output_format) as sentence_writer, \
                OutputWriter(passages_path, output_format) as passage_writer:
            for line_num, line in tqdm(
                enumerate(lines, 1), total=len(lines), desc="Splitting passages"
            ):
                line = line.strip()
                if not line:
                    continue
                try:
                    record = json.loads(line)
                except json.JSONDecodeError as e:
                    logger.warning(f"Line {line_num}: invalid JSON ({e}), skipping")
                    continue
                if not isinstance(record, dict):
                    logger.warning(f"Line {line_num}: not a JSON object, skipping")
                    continue

                try:
                    processed = self.process_record(record, line_num)
                except InvalidInputError as e:
                    logger.warning(f"Line {line_num}: {e}, skipping")
                    continue
                if processed is None:
                    continue

                passage_id, result, status = processed
                sentence_writer.write_rows(
                    sentence_rows(passage_id, result, splitter_config.review_threshold)
                )
                if self.config.output.save_statuses:
                    passage_writer.write_row(
                        passage_row(passage_id, result, status,
                                    splitter_config.reliable_threshold)
                    )
                passages_processed += 1

        logger.info(f"Sentences written to {sentences_path}")
        if self.config.output.save_statuses:
            logger.info(f"Passage statuses written to {passages_path}")
        return passages_processed

    def run(self) -> int:
        """Run the split pipeline.

        Returns:
            Number of passages processed
        """
        if not self.config.input_file:
            raise ValueError("Input file not specified in configuration")

        if not self.config.input_file.exists():
            raise FileNotFoundError(f"Input file not found: {self.config.input_file}")

        logger.info("Starting split pipeline")
        count = self.process_file(self.config.input_file)
        logger.info(f"Pipeline complete. Processed {count} passages")
        return count
