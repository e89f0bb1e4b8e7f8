"""Schema exports.

Rather than importing from individual schema files, you can
import everything from godocs_client.schemas.
"""

from godocs_client.schemas.admin import AboutInfo, CleanResult
from godocs_client.schemas.documents import Document, PaginatedDocuments
from godocs_client.schemas.jobs import Job, JobStatus, JobType
from godocs_client.schemas.tree import SEARCH_RESULTS_ID, FileSystemResponse, TreeNode
from godocs_client.schemas.wordcloud import WordCloudMetadata, WordCloudResponse, WordFrequency

__all__ = [
    # Tree
    "TreeNode",
    "FileSystemResponse",
    "SEARCH_RESULTS_ID",
    # Documents
    "Document",
    "PaginatedDocuments",
    # Word cloud
    "WordFrequency",
    "WordCloudMetadata",
    "WordCloudResponse",
    # Jobs
    "Job",
    "JobStatus",
    "JobType",
    # Admin
    "CleanResult",
    "AboutInfo",
]
