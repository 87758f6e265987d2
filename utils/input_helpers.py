"""Helper functions for user input."""


def get_user_input(prompt, required=True, default=None):
    """Get user input with validation"""
    while True:
        value = input(prompt).strip()
        if value or not required:
            return value if value else default
        print("This field is required. Please enter a value.")

def parse_project_reference(value):
    """Turn typed project input into an int ID or a namespaced path."""
    value = value.strip()
    if value.isdigit():
        return int(value)
    return value

def parse_int_list(value):
    """Parse a comma separated list of integers.

    Returns None for blank input so the field stays absent. A single ``-``
    means an explicit empty list.

    Raises:
        ValueError: if any item is not an integer
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None
    if value == '-':
        return []
    return [int(item.strip()) for item in value.split(',') if item.strip()]

def get_int_input(prompt, required=True):
    """Prompt until an integer (or blank, if not required) is entered."""
    while True:
        value = get_user_input(prompt, required=required)
        if value is None:
            return None
        try:
            return int(value)
        except ValueError:
            print("Error: Please enter a valid number.")

def get_project_input():
    """Prompt for a project ID or path."""
    return parse_project_reference(get_user_input("Enter project ID or path (e.g. group/project): "))
