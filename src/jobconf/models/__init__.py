from .batch_writer_config import (
    BatchWriterConfig as BatchWriterConfig,
    UNBOUNDED_MS as UNBOUNDED_MS,
)
