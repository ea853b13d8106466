from .dynamodb import count_all as count_all
from .dynamodb import get_table as get_table
from .dynamodb import is_conditional_check_failure as is_conditional_check_failure
from .dynamodb import query_all as query_all
