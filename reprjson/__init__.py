"""Convert repr-style debug output (``u'x'``, ``True``, bare words) into JSON.

Usage:
    from reprjson import convert

    result = convert("{name: 'Bob', active: True, notes: None}")
    if result.success:
        print(result.json)
"""

from reprjson.core.converter import PythonNotationConverter, convert
from reprjson.core.errors import ConversionError
from reprjson.core.tokens import ConversionResult

__all__ = ["ConversionError", "ConversionResult", "PythonNotationConverter", "convert"]
