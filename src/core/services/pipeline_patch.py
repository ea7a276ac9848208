"""Pipeline patch orchestration.

The CLI delegates the whole flow to `patch_pipeline`: validate the options,
read the pipeline through a `PipelineConfigSource`, apply one JSON
merge-patch fragment and hand the merged document to an `OutputSink`. Both
collaborators are injected, which keeps printing and HTTP out of this module.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any

import json_merge_patch

from core.domain.models import PatchOptions, PatchOutcome, PipelineRef
from core.domain.output_format import OutputFormat
from core.errors import MergePatchError, RemoteFetchError, UsageError
from core.interfaces.output_sink import OutputSink
from core.interfaces.pipeline_source import PipelineConfigSource

logger = logging.getLogger(__name__)

DISABLE_FRAGMENT = '{"disabled":"true"}'
ENABLE_FRAGMENT = '{"disabled":"false"}'


def validate_options(options: PatchOptions) -> PipelineRef:
    """Check the identifiers and that some patch content was provided."""

    if not options.application or not options.name:
        raise UsageError("one of required parameters 'application' or 'name' not set")
    if not options.patch and not options.has_toggle:
        raise UsageError("one of 'patch', 'enable' or 'disable' must be provided")
    return PipelineRef(application=options.application, name=options.name)


def build_patch_fragments(options: PatchOptions) -> list[str]:
    """Ordered patch fragments: the user patch first, then the toggle.

    `--disable` wins when both toggles are set. The toggle values are the JSON
    strings "true"/"false", not booleans.
    """

    fragments: list[str] = []
    if options.patch:
        fragments.append(options.patch)

    if options.disable:
        fragments.append(DISABLE_FRAGMENT)
    elif options.enable:
        fragments.append(ENABLE_FRAGMENT)
    return fragments


def load_pipeline(source: PipelineConfigSource, ref: PipelineRef) -> Any:
    """Read the pipeline document; anything but a 200 answer is an error."""

    fetched = source.get_pipeline_config(ref.application, ref.name)
    if fetched.status_code != 200:
        raise RemoteFetchError.from_status(
            application=ref.application,
            name=ref.name,
            status_code=fetched.status_code,
        )
    return fetched.payload


def parse_fragment(fragment: str) -> Any:
    try:
        return json.loads(fragment)
    except json.JSONDecodeError as exc:
        raise MergePatchError(f"patch is not valid JSON: {exc}") from exc


def apply_merge_patch(document: Any, patch: Any) -> Any:
    """Apply an RFC 7386 merge-patch; `document` is left untouched.

    `patch` is an already decoded JSON value: a JSON string literal is a
    string patch and replaces the document like any other non-object value.
    """

    try:
        # Round-trip so the target is plain JSON data the merge can own.
        target = json.loads(json.dumps(document))
    except (TypeError, ValueError) as exc:
        raise MergePatchError(f"pipeline document is not valid JSON: {exc}") from exc
    return json_merge_patch.merge(target, copy.deepcopy(patch))


def patch_pipeline(
    options: PatchOptions,
    *,
    source: PipelineConfigSource,
    sink: OutputSink,
    fmt: OutputFormat = OutputFormat.JSON,
) -> PatchOutcome:
    """Fetch, merge and emit the patched pipeline. Nothing is written back."""

    ref = validate_options(options)
    fragments = build_patch_fragments(options)
    pipeline = load_pipeline(source, ref)

    # Only the first fragment is applied; a user patch shadows the toggle.
    applied, ignored = fragments[0], fragments[1:]
    if ignored:
        logger.warning(
            "only the first patch fragment is applied; ignoring %d more: %s",
            len(ignored),
            ", ".join(ignored),
        )

    parsed = parse_fragment(applied)
    merged = apply_merge_patch(pipeline, parsed)
    logger.debug("patched pipeline %s/%s with %s", ref.application, ref.name, applied)

    sink.emit(merged, fmt)
    return PatchOutcome(
        ref=ref,
        document=merged,
        applied_fragment=parsed,
        ignored_fragments=list(ignored),
    )
