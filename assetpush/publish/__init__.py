"""Publish pipeline."""

from assetpush.publish.models import PublishResult
from assetpush.publish.pipeline import PublishPipeline, create_publish_pipeline


__all__ = ["PublishPipeline", "PublishResult", "create_publish_pipeline"]
