from .services import AssignmentService


class AssignmentsInterface:
    """Public gateway for the Assignments module."""

    @staticmethod
    def get_assignment_for_user(assignment_id: int, user_id: int):
        """Raises NotFoundError unless the user owns the assignment."""
        return AssignmentService.get_assignment_for_user(assignment_id, user_id)

    @staticmethod
    def check_and_mark_assignment_completed(assignment_id: int, user_id: int) -> bool:
        return AssignmentService.check_and_mark_assignment_completed(assignment_id, user_id)
