"""Shared builders for test data."""


def make_student(reg_no, marks=None, statuses=(), **fields):
    """Raw student sub-document as stored inside a batch"""
    return {
        "regNo": reg_no,
        "name": fields.pop("name", f"Student {reg_no}"),
        "department": fields.pop("department", "CSE"),
        "marks": marks if marks is not None else {},
        "attendance": [
            {"date": f"2024-01-{i + 1:02d}", "session": "FN", "status": status}
            for i, status in enumerate(statuses)
        ],
        **fields,
    }
