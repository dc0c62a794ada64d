"""Control-plane request and response schemas."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class Metric(str, Enum):
    """Distance metrics supported for similarity search."""

    EUCLIDEAN = "euclidean"
    COSINE = "cosine"
    DOTPRODUCT = "dotproduct"


class PodType(str, Enum):
    """Pod families."""

    S1 = "s1"
    P1 = "p1"
    P2 = "p2"


class PodSize(str, Enum):
    """Pod sizes within a family."""

    X1 = "x1"
    X2 = "x2"
    X4 = "x4"
    X8 = "x8"


class CreateIndexParams(BaseModel):
    """Parameters for creating an index."""

    name: str = Field(..., description="Index name, at most 45 characters")
    dimension: int = Field(..., description="Dimension of the vectors stored in the index")
    metric: Metric | None = Field(None, description="Distance metric used for similarity search")
    pods: int | None = Field(None, description="Number of pods to use, including replicas")
    replicas: int | None = Field(None, description="Number of replicas")
    pod_type: PodType | str | None = Field(None, description="Pod family, e.g. 'p1'")
    pod_size: PodSize | str | None = Field(None, description="Pod size, e.g. 'x2'")
    metadata_config: dict[str, list[str]] | None = Field(
        None, description='Metadata fields to index, as {"indexed": [...]}'
    )
    source_collection: str | None = Field(None, description="Collection to create the index from")


class ConfigureIndexParams(BaseModel):
    """Parameters for reconfiguring an existing index."""

    index_name: str
    replicas: int | None = None
    pod_type: PodType | str | None = None
    pod_size: PodSize | str | None = None


class IndexDatabase(BaseModel):
    """Configuration of an index as reported by the control plane."""

    name: str
    metric: str | None = None
    dimension: int = 0
    replicas: int = 0
    shards: int = 0
    pods: int = 0
    pod_type: str | None = None
    metadata_config: dict[str, Any] | None = None


class IndexStatus(BaseModel):
    """Runtime status of an index."""

    waiting: list[Any] = Field(default_factory=list)
    crashed: list[Any] = Field(default_factory=list)
    host: str | None = None
    port: int | None = None
    state: str | None = None
    ready: bool = False


class DescribeIndexResponse(BaseModel):
    """Response model for describe_index."""

    database: IndexDatabase
    status: IndexStatus = Field(default_factory=IndexStatus)
