"""CLI interface for GitLab external status checks."""

import logging

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from config.constants import STATUS_VALUES
from core.errors import GitLabError, TransportError
from models.options import (
    SetExternalStatusCheckStatusOptions,
    CreateExternalStatusCheckOptions,
    UpdateExternalStatusCheckOptions,
)
from utils.input_helpers import get_user_input, get_int_input, get_project_input, parse_int_list
from utils.pagination import collect_pages

logger = logging.getLogger(__name__)

console = Console()

def show_merge_status_checks(checks):
    """Render merge request status checks as a table."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("External URL")
    table.add_column("Status")

    styles = {'passed': 'green', 'failed': 'red', 'pending': 'yellow'}
    for check in checks:
        style = styles.get(check.status, '')
        status = f"[{style}]{check.status}[/{style}]" if style else escape(check.status)
        table.add_row(str(check.id), escape(check.name), escape(check.external_url), status)

    console.print(table)

def show_project_status_checks(checks):
    """Render project status checks with their protected branches."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("ID", justify="right")
    table.add_column("Name")
    table.add_column("External URL")
    table.add_column("Protected Branches")

    for check in checks:
        branches = ", ".join(
            f"{escape(branch.name)} ({branch.id})" for branch in check.protected_branches
        ) or "[dim]all branches[/dim]"
        table.add_row(str(check.id), escape(check.name), escape(check.external_url), branches)

    console.print(table)

def report_response(response, action):
    console.print(f"[green]{action} succeeded[/green] (HTTP {response.status_code})")

def report_error(error):
    """Print a client error, noting whether the request reached the server."""
    if isinstance(error, TransportError) and error.sent:
        console.print(f"[red]Request rejected (HTTP {error.status_code}):[/red] {escape(str(error))}")
    elif isinstance(error, TransportError):
        console.print(f"[red]Request could not be sent:[/red] {escape(str(error))}")
    else:
        console.print(f"[red]Invalid request:[/red] {escape(str(error))}")

def prompt_status():
    """Prompt for a status value, offering the known values."""
    choices = "/".join(STATUS_VALUES)
    return get_user_input(f"Enter status ({choices}, blank to omit): ", required=False)

def prompt_branch_ids(prompt):
    """Prompt for protected branch IDs; blank leaves them out, '-' clears them."""
    while True:
        value = get_user_input(prompt, required=False)
        try:
            return parse_int_list(value)
        except ValueError:
            print("Error: Enter comma separated numeric IDs.")

def list_merge_request_checks(service):
    project = get_project_input()
    mr_iid = get_int_input("Enter merge request IID: ")
    checks, _ = service.list_merge_status_checks(project, mr_iid)
    show_merge_status_checks(checks)

def list_project_checks(service):
    project = get_project_input()
    checks = collect_pages(service.list_project_status_checks, project)
    show_project_status_checks(checks)

def set_check_status(service):
    project = get_project_input()
    mr_iid = get_int_input("Enter merge request IID: ")
    opt = SetExternalStatusCheckStatusOptions(
        sha=get_user_input("Enter commit SHA: "),
        external_status_check_id=get_int_input("Enter external status check ID: "),
        status=prompt_status(),
    )
    response = service.set_external_status_check_status(project, mr_iid, opt)
    report_response(response, "Setting status")

def create_check(service):
    project = get_project_input()
    opt = CreateExternalStatusCheckOptions(
        name=get_user_input("Enter status check name: "),
        external_url=get_user_input("Enter external URL: "),
        protected_branch_ids=prompt_branch_ids(
            "Enter protected branch IDs (comma separated, blank for all branches): "
        ),
    )
    response = service.create_external_status_check(project, opt)
    report_response(response, "Creating status check")

def update_check(service):
    project = get_project_input()
    check_id = get_int_input("Enter status check ID: ")
    print("Leave a field blank to keep its current value.")
    opt = UpdateExternalStatusCheckOptions(
        name=get_user_input("New name: ", required=False),
        external_url=get_user_input("New external URL: ", required=False),
        protected_branch_ids=prompt_branch_ids(
            "New protected branch IDs (comma separated, '-' to clear): "
        ),
    )
    response = service.update_external_status_check(project, check_id, opt)
    report_response(response, "Updating status check")

def delete_check(service):
    project = get_project_input()
    check_id = get_int_input("Enter status check ID: ")
    confirm = get_user_input(f"Delete status check {check_id}? (y/n): ").lower()
    if confirm != 'y':
        print("Deletion cancelled.")
        return
    response = service.delete_external_status_check(project, check_id)
    report_response(response, "Deleting status check")

MENU_ACTIONS = {
    "1": ("List merge request status checks", list_merge_request_checks),
    "2": ("List project status checks", list_project_checks),
    "3": ("Set status check status", set_check_status),
    "4": ("Create status check", create_check),
    "5": ("Update status check", update_check),
    "6": ("Delete status check", delete_check),
}

def run_cli(client):
    """Run the main menu until the user exits."""
    service = client.external_status_checks

    while True:
        print("\n" + "="*50)
        print("        EXTERNAL STATUS CHECKS")
        print("="*50)
        for key, (label, _) in MENU_ACTIONS.items():
            print(f"  {key}. {label}")
        print("  7. Exit")

        choice = get_user_input("\nEnter your choice (1-7): ", required=False)
        if choice in (None, "7"):
            print("Goodbye.")
            return

        action = MENU_ACTIONS.get(choice)
        if action is None:
            print("\nInvalid choice. Please try again.")
            continue

        label, handler = action
        try:
            handler(service)
        except GitLabError as e:
            logger.debug("%s failed", label, exc_info=True)
            report_error(e)
