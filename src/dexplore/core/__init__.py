"""Word list index and query engine behind the explorer shell."""

from .errors import ExplorerError, InvalidPattern, QueryCancelled, SourceUnavailable
from .query_engine import QueryEngine, QueryKind, Request
from .result_ranker import ResultSet, rank
from .signature_index import SignatureIndex, compute_signature
from .subset_matcher import SubsetMatcher, candidate_count, candidate_signatures
from .word_store import WordStore
