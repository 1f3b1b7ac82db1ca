"""
Services - check orchestration and result aggregation.
"""

from .overall import Overall
from .check_service import CheckService, CheckResults, ExtractedRecords, initialize_check

__all__ = ['Overall', 'CheckService', 'CheckResults', 'ExtractedRecords', 'initialize_check']
