"""OpenAI GPT integration for question and action-item classification."""

import json
import re
from typing import Any, Dict, Iterable, List, Optional, Sequence
from openai import OpenAI
from openai import APIError, RateLimitError, APIConnectionError
from tqdm import tqdm

from transcript_analyzer.config import Config
from transcript_analyzer.models import AnalyzedEntry, EntryAnalysis, TranscriptEntry


CLASSIFICATION_PROMPT = """Analyze the following meeting transcript entries. For each entry, determine if it is a question AND if it is an action item or task.
An action item is a task assigned to someone or a commitment to do something.

The transcript is provided as an array of objects, each with an 'id' and 'text'.

Respond with a JSON array where each object corresponds to a transcript entry.
Each object in your response MUST contain the original 'id', a boolean 'isQuestion', and a boolean 'isActionItem'.

Only respond with the JSON array. Do not add any extra text, explanations, or markdown formatting."""

_CODE_FENCE = re.compile(r'```(?:json)?\n?')


def entries_for_prompt(entries: Iterable[TranscriptEntry]) -> List[Dict[str, Any]]:
    """Reduce entries to the id/text pairs sent to the classifier."""
    return [{'id': entry.id, 'text': entry.text} for entry in entries]


def parse_classification(response_text: str, expected_ids: Iterable[int]) -> List[EntryAnalysis]:
    """
    Parse the model reply into EntryAnalysis results.

    Items without an integer id, with an id that was not sent, or without
    boolean isQuestion/isActionItem values are ignored; those entries stay
    unanalyzed.

    Args:
        response_text: Raw reply, possibly wrapped in a Markdown code fence
        expected_ids: Ids that were part of the request

    Returns:
        List of EntryAnalysis in reply order

    Raises:
        RuntimeError: If the reply is not a JSON array
    """
    cleaned = _CODE_FENCE.sub('', response_text.strip()).strip()

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        raise RuntimeError(f"Classifier returned invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise RuntimeError("Classifier did not return a valid JSON array.")

    wanted = set(expected_ids)
    results = []
    for item in data:
        if not isinstance(item, dict):
            continue
        entry_id = item.get('id')
        # bool is an int subclass, reject it explicitly
        if not isinstance(entry_id, int) or isinstance(entry_id, bool) or entry_id not in wanted:
            continue
        is_question = item.get('isQuestion')
        is_action_item = item.get('isActionItem')
        # Missing or non-boolean flags leave the entry unanalyzed
        if not isinstance(is_question, bool) or not isinstance(is_action_item, bool):
            continue
        results.append(EntryAnalysis(
            id=entry_id,
            is_question=is_question,
            is_action_item=is_action_item,
        ))
    return results


def _request_classification(client: Any, model: str, batch: Sequence[TranscriptEntry]) -> str:
    payload = json.dumps(entries_for_prompt(batch), indent=2, ensure_ascii=False)
    user_message = f"{CLASSIFICATION_PROMPT}\n\nTranscript:\n{payload}"

    request_params = {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": user_message
            }
        ]
    }

    # Only set temperature if model supports it (gpt-5 models only support default)
    if not model.startswith("gpt-5"):
        request_params["temperature"] = 0.0

    try:
        response = client.chat.completions.create(**request_params)
    except RateLimitError as e:
        raise RuntimeError(f"Rate limit exceeded: {e}. Please try again later.") from e
    except APIConnectionError as e:
        raise RuntimeError(f"Connection error: {e}") from e
    except APIError as e:
        error_msg = str(e)
        if "quota" in error_msg.lower() or "billing" in error_msg.lower():
            raise RuntimeError(
                f"OpenAI API quota/billing error: {error_msg}. "
                f"Please check your OpenAI account."
            ) from e
        raise RuntimeError(f"OpenAI API error: {error_msg}") from e

    content = response.choices[0].message.content
    if not content:
        raise RuntimeError("Classifier returned an empty response")
    return content


def classify_entries(
    entries: Sequence[TranscriptEntry],
    client: Optional[Any] = None,
    batch_size: Optional[int] = None
) -> List[EntryAnalysis]:
    """
    Ask the model which entries are questions and which are action items.

    Args:
        entries: Parsed transcript entries
        client: OpenAI-compatible client; built from Config when omitted
        batch_size: Entries per request, defaults to Config.ANALYSIS_BATCH_SIZE

    Returns:
        One EntryAnalysis per entry the model answered for (may be a subset)

    Raises:
        RuntimeError: If the API call fails or the reply cannot be parsed
    """
    if not entries:
        return []

    if client is None:
        Config.validate()
        client = OpenAI(
            api_key=Config.OPENAI_API_KEY,
            timeout=300.0  # 5 minute timeout
        )

    size = batch_size if batch_size is not None else Config.ANALYSIS_BATCH_SIZE
    if size < 1:
        raise ValueError(f"batch_size must be at least 1, got {size}")
    batches = [entries[i:i + size] for i in range(0, len(entries), size)]

    results: List[EntryAnalysis] = []
    for batch in tqdm(batches, desc="Classifying", unit="batch", ncols=80, leave=False):
        response_text = _request_classification(client, Config.ANALYSIS_MODEL, batch)
        results.extend(parse_classification(response_text, (entry.id for entry in batch)))

    return results


def merge_analysis(
    entries: Iterable[TranscriptEntry],
    results: Iterable[EntryAnalysis]
) -> List[AnalyzedEntry]:
    """
    Join classification results onto entries by id.

    Entries without a result keep None flags ("unanalyzed").
    """
    by_id = {result.id: result for result in results}
    return [AnalyzedEntry.from_entry(entry, by_id.get(entry.id)) for entry in entries]
