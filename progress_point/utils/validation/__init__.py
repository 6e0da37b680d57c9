"""Validation utilities - Input validation, record normalization"""
from .validation_utils import ValidationUtils
from .input_validator import get_json_data, get_optional_query_params
from .record_normalizer import StudentRecordNormalizer
