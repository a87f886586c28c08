#!/usr/bin/env python3
"""
Post-process the generated PAY.JP client (client.gen.go).

Renames response fields to friendlier names (JSON200 -> Result,
ApplicationproblemJSON404 -> NotFound), normalizes xxxId parameters to xxxID,
and regenerates error_mappings.gen.go from the error fields found in the file.
"""

import json
import re
import sys
from collections import Counter, namedtuple

from http_status import go_status_constant, http_status_name

INPUT_FILE = 'client.gen.go'
OUTPUT_MAPPINGS_FILE = 'error_mappings.gen.go'
DEFAULT_PACKAGE = 'payjpv2'

# Success response fields. Error fields are discovered from the input.
SUCCESS_FIELD_MAPPINGS = {
    'JSON200': 'Result',
    'JSON201': 'Result',
}

ERROR_FIELD_PREFIX = 'ApplicationproblemJSON'
ERROR_FIELD_PATTERN = re.compile(ERROR_FIELD_PREFIX + r'([0-9]+)')

# customerId, paymentFlowId, checkoutSessionId; not Invalid, id or someIdentifier
ID_PARAM_PATTERN = re.compile(r'\b([a-z][a-zA-Z]*)Id\b')

PACKAGE_PATTERN = re.compile(r'^package\s+(\w+)', re.MULTILINE)

ErrorMapping = namedtuple('ErrorMapping', ['field_name', 'status_code'])

def extract_error_field_mappings(code):
    """Map each ApplicationproblemJSON{code} token in the source to its status name."""
    mappings = {}
    for match in ERROR_FIELD_PATTERN.finditer(code):
        old_name = match.group(0)
        if old_name in mappings:
            continue
        try:
            status_code = int(match.group(1))
        except ValueError:
            continue
        mappings[old_name] = http_status_name(status_code)
    return mappings

def replace_field_name(code, old_name, new_name):
    """Rename a struct field at its declaration, its accesses and its json tag."""
    old = re.escape(old_name)

    # Declaration: "JSON200 *CustomerResponse"
    code = re.sub(r'\b' + old + r'(\s+\*?\w+)', lambda m: new_name + m.group(1), code)

    # Access: "resp.JSON200"
    code = re.sub(r'\.' + old + r'\b', lambda m: '.' + new_name, code)

    # Tag: `json:"JSON200"`
    code = re.sub(r'json:"' + old + r'"', lambda m: 'json:"' + new_name + '"', code)

    return code

def apply_field_mappings(code, mappings):
    """Apply every old -> new field rename in a mapping table."""
    for old_name, new_name in mappings.items():
        code = replace_field_name(code, old_name, new_name)
    return code

def replace_id_params(code):
    """Rewrite camelCase xxxId identifiers to Go-style xxxID."""
    return ID_PARAM_PATTERN.sub(r'\1ID', code)

def detect_package_name(code):
    match = PACKAGE_PATTERN.search(code)
    return match.group(1) if match else DEFAULT_PACKAGE

def error_mappings(error_field_mappings):
    """Build the ErrorMapping list, sorted by status code, one entry per code."""
    by_status = {}
    for old_name, new_name in sorted(error_field_mappings.items()):
        try:
            status_code = int(old_name[len(ERROR_FIELD_PREFIX):])
        except ValueError:
            continue
        by_status.setdefault(status_code, ErrorMapping(new_name, status_code))
    return [by_status[code] for code in sorted(by_status)]

def render_error_mappings(mappings, package=DEFAULT_PACKAGE):
    """Render error_mappings.gen.go."""
    entries = [(m.field_name, go_status_constant(m.status_code)) for m in mappings]

    lines = ['// Code generated by postprocess. DO NOT EDIT.', '']
    lines.append(f'package {package}')
    lines.append('')
    if any(constant.startswith('http.') for _, constant in entries):
        lines.append('import "net/http"')
        lines.append('')
    lines.append('// ErrorFieldMapping defines the mapping between error field name and HTTP status code')
    lines.append('type ErrorFieldMapping struct {')
    lines.append('\tFieldName  string')
    lines.append('\tStatusCode int')
    lines.append('}')
    lines.append('')
    lines.append('// ErrorFieldMappings is the list of error field mappings used by ParseAPIError')
    lines.append('var ErrorFieldMappings = []ErrorFieldMapping{')
    for field_name, constant in entries:
        lines.append(f'\t{{{json.dumps(field_name)}, {constant}}},')
    lines.append('}')

    return '\n'.join(lines) + '\n'

def generate_error_mappings_file(filename, mappings, package=DEFAULT_PACKAGE):
    content = render_error_mappings(mappings, package)
    with open(filename, 'w') as f:
        f.write(content)

def postprocess(code):
    """Run every rename pass. Returns (rewritten code, discovered error field mappings)."""
    error_field_mappings = extract_error_field_mappings(code)

    print("Applying success field renames...", file=sys.stderr)
    code = apply_field_mappings(code, SUCCESS_FIELD_MAPPINGS)

    print(f"Applying {len(error_field_mappings)} error field renames...", file=sys.stderr)
    code = apply_field_mappings(code, error_field_mappings)

    print("Normalizing ID parameter names...", file=sys.stderr)
    code = replace_id_params(code)

    return code, error_field_mappings

def count_occurrences(code, name):
    return len(re.findall(r'\b' + re.escape(name) + r'\b', code))

def print_summary(original, modified, error_field_mappings):
    """Print what changed, counted against the original text."""
    if original == modified:
        print("No changes were made.")
        return

    print("\nChanges applied:")

    ordered_errors = sorted(
        error_field_mappings.items(),
        key=lambda item: (int(item[0][len(ERROR_FIELD_PREFIX):]), item[0]),
    )
    for old_name, new_name in list(SUCCESS_FIELD_MAPPINGS.items()) + ordered_errors:
        old_count = count_occurrences(original, old_name)
        if old_count > 0:
            print(f"  - {old_name} → {new_name}: {old_count} replacements")

    id_matches = Counter(m.group(0) for m in ID_PARAM_PATTERN.finditer(original))
    total = sum(id_matches.values())
    if total:
        print(f"  - ID naming convention (xxxId → xxxID): {total} replacements")
        for name, count in id_matches.items():
            print(f"      {name} → {replace_id_params(name)}: {count}")

def main():
    try:
        with open(INPUT_FILE, 'r') as f:
            original = f.read()
    except OSError as e:
        print(f"Error reading file: {e}", file=sys.stderr)
        sys.exit(1)

    modified, error_field_mappings = postprocess(original)
    mappings = error_mappings(error_field_mappings)
    package = detect_package_name(modified)

    # The mappings file is only written once client.gen.go is
    try:
        with open(INPUT_FILE, 'w') as f:
            f.write(modified)
    except OSError as e:
        print(f"Error writing file: {e}", file=sys.stderr)
        sys.exit(1)

    try:
        generate_error_mappings_file(OUTPUT_MAPPINGS_FILE, mappings, package)
    except OSError as e:
        print(f"Error generating {OUTPUT_MAPPINGS_FILE}: {e}", file=sys.stderr)
        sys.exit(1)

    print(f"Successfully post-processed {INPUT_FILE}")
    print(f"Successfully generated {OUTPUT_MAPPINGS_FILE}")
    print_summary(original, modified, error_field_mappings)

if __name__ == '__main__':
    main()
