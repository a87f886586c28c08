#!/usr/bin/env python3
"""
Convert the PAY.JP OpenAPI 3.1 spec into the 3.0.3 dialect the Go generator understands.

- null members of anyOf / type lists become "nullable: true"
- application/problem+json responses are served as application/json
"""

import json
import sys

INPUT_SPEC_FILE = '../openapi.json'
OUTPUT_SPEC_FILE = 'openapi-converted.json'
TARGET_OPENAPI_VERSION = '3.0.3'

PROBLEM_JSON = 'application/problem+json'
PLAIN_JSON = 'application/json'

def is_null_schema(item):
    return isinstance(item, dict) and item.get('type') == 'null'

def fix_any_of(schema, any_of):
    """Drop null members of an anyOf; collapse it when a single schema remains."""
    remaining = [item for item in any_of if not is_null_schema(item)]
    has_null = len(remaining) != len(any_of)

    for item in remaining:
        fix_null_types(item)

    if len(remaining) == 1:
        if isinstance(remaining[0], dict):
            del schema['anyOf']
            schema.update(remaining[0])
            if has_null:
                schema['nullable'] = True
        else:
            schema['anyOf'] = remaining
    elif len(remaining) > 1:
        schema['anyOf'] = remaining
    elif has_null:
        # anyOf held nothing but null
        del schema['anyOf']
        schema['type'] = 'string'
        schema['nullable'] = True

def fix_type_list(schema, types):
    """Turn ["string", "null"] into "string" + nullable."""
    non_null = [t for t in types if t != 'null']
    has_null = len(non_null) != len(types)

    if len(non_null) == 1:
        schema['type'] = non_null[0]
        if has_null:
            schema['nullable'] = True
    elif len(non_null) > 1:
        schema['type'] = non_null

def fix_null_types(node):
    """Rewrite 3.1-style null unions into 3.0 nullable schemas, in place."""
    if isinstance(node, dict):
        for key, value in list(node.items()):
            if key == 'anyOf' and isinstance(value, list):
                fix_any_of(node, value)
            elif key == 'type' and isinstance(value, list):
                fix_type_list(node, value)
            else:
                # includes a property that happens to be called "type"
                fix_null_types(value)
    elif isinstance(node, list):
        for item in node:
            fix_null_types(item)

def fix_content_types(node):
    """Move application/problem+json media types to application/json, in place."""
    if isinstance(node, dict):
        content = node.get('content')
        if isinstance(content, dict) and PROBLEM_JSON in content:
            content[PLAIN_JSON] = content.pop(PROBLEM_JSON)
        for value in node.values():
            fix_content_types(value)
    elif isinstance(node, list):
        for item in node:
            fix_content_types(item)

def convert_spec(spec):
    spec['openapi'] = TARGET_OPENAPI_VERSION
    fix_null_types(spec)
    fix_content_types(spec)
    return spec

def main():
    try:
        with open(INPUT_SPEC_FILE, 'r', encoding='utf-8') as f:
            data = f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        spec = json.loads(data)
    except json.JSONDecodeError as e:
        print(f"Error parsing JSON: {e}", file=sys.stderr)
        sys.exit(1)

    print("Converting spec...", file=sys.stderr)
    spec = convert_spec(spec)

    try:
        with open(OUTPUT_SPEC_FILE, 'w', encoding='utf-8') as f:
            json.dump(spec, f, indent=2, ensure_ascii=False)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        sys.exit(1)

    print("Successfully converted OpenAPI spec for oapi-codegen compatibility")

if __name__ == '__main__':
    main()
