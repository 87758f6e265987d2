"""External status checks service for the GitLab API.

GitLab API docs: https://docs.gitlab.com/ee/api/status_checks.html
"""

from typing import List

from pydantic import TypeAdapter, ValidationError

from core.errors import InvalidArgumentError, RequestConstructionError
from core.identifiers import parse_id, resource_id
from models.options import SetExternalStatusCheckStatusOptions, CreateExternalStatusCheckOptions
from models.status_checks import MergeStatusCheck, ProjectStatusCheck

_merge_status_checks = TypeAdapter(List[MergeStatusCheck])
_project_status_checks = TypeAdapter(List[ProjectStatusCheck])


def _coerce_options(opt, options_class):
    """Return ``opt`` as an ``options_class`` instance so its required fields are checked.

    ``None`` becomes an empty instance and a dict is validated into one. Any
    other type, including a different options class, is rejected.
    """
    if opt is None:
        return options_class()
    if isinstance(opt, options_class):
        return opt
    if isinstance(opt, dict):
        try:
            return options_class.model_validate(opt)
        except ValidationError as e:
            raise RequestConstructionError(f"invalid {options_class.__name__}: {e}") from e
    raise InvalidArgumentError(
        f"options must be {options_class.__name__} or a dict, got {type(opt).__name__}"
    )


class ExternalStatusChecksService:
    """Service for external status check operations.

    Holds no state besides the client; every call is one request/response
    cycle. ``pid`` is a project ID, a ``group/project`` path or a ProjectID.
    Extra positional arguments are request option functions from
    ``core.request_options``.
    """

    def __init__(self, client):
        self.client = client

    def list_merge_status_checks(self, pid, mr_iid, opt=None, *request_options):
        """List the external status checks that apply to a merge request and their status.

        Args:
            pid: project reference
            mr_iid (int): merge request IID within the project
            opt (ListOptions, optional): pagination options

        Returns:
            tuple: (list of MergeStatusCheck, Response)
        """
        project = parse_id(pid)
        mr = resource_id(mr_iid, "merge request IID")
        path = f"projects/{project}/merge_requests/{mr}/status_checks"

        request = self.client.new_request("GET", path, opt, request_options)
        return self.client.do(request, _merge_status_checks.validate_python)

    def list_project_status_checks(self, pid, opt=None, *request_options):
        """List the external status checks of a project.

        Returns:
            tuple: (list of ProjectStatusCheck, Response)
        """
        project = parse_id(pid)
        path = f"projects/{project}/external_status_checks"

        request = self.client.new_request("GET", path, opt, request_options)
        return self.client.do(request, _project_status_checks.validate_python)

    def set_external_status_check_status(self, pid, mr_iid, opt, *request_options):
        """Set the status of an external status check for a merge request commit.

        ``opt.sha`` and ``opt.external_status_check_id`` are required.

        Returns:
            Response
        """
        project = parse_id(pid)
        mr = resource_id(mr_iid, "merge request IID")
        path = f"projects/{project}/merge_requests/{mr}/status_check_responses"

        opt = _coerce_options(opt, SetExternalStatusCheckStatusOptions)
        request = self.client.new_request("POST", path, opt, request_options)
        _, response = self.client.do(request)
        return response

    def create_external_status_check(self, pid, opt, *request_options):
        """Create an external status check. ``opt.name`` and ``opt.external_url`` are required."""
        project = parse_id(pid)
        path = f"projects/{project}/external_status_checks"

        opt = _coerce_options(opt, CreateExternalStatusCheckOptions)
        request = self.client.new_request("POST", path, opt, request_options)
        _, response = self.client.do(request)
        return response

    def delete_external_status_check(self, pid, check_id, *request_options):
        project = parse_id(pid)
        check = resource_id(check_id, "status check ID")
        path = f"projects/{project}/external_status_checks/{check}"

        request = self.client.new_request("DELETE", path, None, request_options)
        _, response = self.client.do(request)
        return response

    def update_external_status_check(self, pid, check_id, opt=None, *request_options):
        """Update an external status check.

        Only the fields present in ``opt`` are sent, the others keep their
        current value on the server.
        """
        project = parse_id(pid)
        check = resource_id(check_id, "status check ID")
        path = f"projects/{project}/external_status_checks/{check}"

        request = self.client.new_request("PUT", path, opt, request_options)
        _, response = self.client.do(request)
        return response
