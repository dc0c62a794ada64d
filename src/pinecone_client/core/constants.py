"""Central constants shared across the control-plane and data-plane clients."""

from typing import Final

# Service addresses.
CONTROLLER_URL_TEMPLATE: Final[str] = "https://controller.{environment}.pinecone.io"
INDEX_HOST_TEMPLATE: Final[str] = "{index_name}-{project_name}.svc.{environment}.pinecone.io"
GRPC_PORT: Final[int] = 443

# Headers and call metadata.
API_KEY_HEADER: Final[str] = "Api-Key"
GRPC_API_KEY_METADATA: Final[str] = "api-key"

# Control-plane paths.
DATABASES_PATH: Final[str] = "/databases"

# Data-plane paths.
UPSERT_PATH: Final[str] = "/vectors/upsert"
QUERY_PATH: Final[str] = "/query"
FETCH_PATH: Final[str] = "/vectors/fetch"
UPDATE_PATH: Final[str] = "/vectors/update"
DELETE_PATH: Final[str] = "/vectors/delete"
DESCRIBE_INDEX_STATS_PATH: Final[str] = "/describe_index_stats"

# Limits.
MAX_INDEX_NAME_LENGTH: Final[int] = 45
MAX_UINT32: Final[int] = 2**32 - 1  # top_k and sparse indices are uint32 on the wire

# Control-plane body keys.
K_NAME: Final[str] = "name"
K_DIMENSION: Final[str] = "dimension"
K_METRIC: Final[str] = "metric"
K_PODS: Final[str] = "pods"
K_REPLICAS: Final[str] = "replicas"
K_POD_TYPE: Final[str] = "pod_type"
K_METADATA_CONFIG: Final[str] = "metadata_config"
K_SOURCE_COLLECTION: Final[str] = "source_collection"

# Data-plane body keys.
K_ID: Final[str] = "id"
K_IDS: Final[str] = "ids"
K_VALUES: Final[str] = "values"
K_INDICES: Final[str] = "indices"
K_SPARSE_VALUES: Final[str] = "sparseValues"
K_SPARSE_VECTOR: Final[str] = "sparseVector"
K_METADATA: Final[str] = "metadata"
K_SET_METADATA: Final[str] = "setMetadata"
K_NAMESPACE: Final[str] = "namespace"
K_VECTORS: Final[str] = "vectors"
K_VECTOR: Final[str] = "vector"
K_TOP_K: Final[str] = "topK"
K_FILTER: Final[str] = "filter"
K_INCLUDE_VALUES: Final[str] = "includeValues"
K_INCLUDE_METADATA: Final[str] = "includeMetadata"
K_DELETE_ALL: Final[str] = "deleteAll"
