"""Centralized request input helpers - DRY Implementation"""

def get_json_data():
    """Centralized JSON parsing"""
    from flask import request
    return request.get_json(silent=True) or {}

def get_optional_query_params(**param_defaults):
    """Get optional query parameters with defaults"""
    from flask import request
    params = {}

    for param, default in param_defaults.items():
        params[param] = request.args.get(param, default)

    return params
