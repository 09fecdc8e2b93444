"""
Grading orchestration: batch generation for an activity and single-student
re-assessment.
"""

from typing import List

from app.core.exceptions import UpstreamError, ValidationError
from app.core.logging import get_logger
from app.core.result import Result, capture_errors
from app.schemas import Assessment
from app.services.assessment_merger import GradingBranch, merge_grading, needs_generation
from app.services.model_invoker import ModelInvoker
from app.services.prompt_builder import build_assessment_prompt
from app.services.response_parser import parse_grading_response
from app.services.roster import RosterResolver
from app.services.store_gateway import StoreGateway
from app.utils import is_blank, require_text

logger = get_logger()


class AssessmentPipeline:
    """
    Composes roster resolution, prompt building, the model call, parsing and
    merging, then persists each graded assessment.
    """

    def __init__(self, gateway: StoreGateway, invoker: ModelInvoker):
        self.gateway = gateway
        self.invoker = invoker
        self.roster_resolver = RosterResolver(gateway)

    @capture_errors
    async def generate_assessment_for_activity(self, activity_id: str) -> Result[List[Assessment]]:
        """
        Grade every student of the activity's course that has a submission and
        no AI generation yet. Students are processed one at a time in roster
        order; the first failure aborts the run. Students graded before the
        failure stay persisted.

        Returns:
            Result.ok(list of processed assessments), possibly empty.
        """
        resolved = self.roster_resolver.resolve(activity_id)
        if not resolved.is_ok:
            return resolved
        roster = resolved.value

        processed: List[Assessment] = []
        for student in roster.students:
            assessment = roster.assessment_for(student.id)
            if not needs_generation(assessment):
                logger.debug("Skipping student %s of activity %s", student.id, activity_id)
                continue
            prompt = build_assessment_prompt(roster.course, roster.activity, assessment)
            try:
                generation = await self.invoker.generate(prompt)
            except UpstreamError:
                logger.error(
                    "Grading aborted for activity %s at student %s (%d already processed)",
                    activity_id,
                    student.id,
                    len(processed),
                )
                raise
            grading = parse_grading_response(generation)
            merge_grading(assessment, generation, grading, GradingBranch.AI_ASSESSMENT)
            self.gateway.save_assessment(activity_id, student.id, assessment)
            logger.info(
                "Graded student %s for activity %s: global grade %s",
                student.id,
                activity_id,
                grading.global_grade,
            )
            processed.append(assessment)

        logger.info("Activity %s: %d assessments generated", activity_id, len(processed))
        return Result.ok(processed)

    @capture_errors
    async def student_re_assessment(
        self, activity_id: str, student_id: str, comment: str
    ) -> Result[Assessment]:
        """
        Re-grade one student's submission with the teacher's comment as extra
        guidance. Writes only the reAssessment branch.

        Returns:
            Result.ok(updated assessment); Result.not_found when the activity,
            the student's assessment or the course is missing (nothing is written).
        """
        require_text(activity_id, "Activity ID")
        require_text(student_id, "Student ID")
        require_text(comment, "Comment")

        activity = self.gateway.get_activity(activity_id)
        if activity is None:
            return Result.not_found(f"Activity {activity_id} not found")
        assessment = self.gateway.get_assessment(activity_id, student_id)
        if assessment is None:
            return Result.not_found(f"Assessment for student {student_id} in activity {activity_id} not found")
        course = self.gateway.get_course(activity.course_id)
        if course is None:
            return Result.not_found(f"Course {activity.course_id} of activity {activity_id} not found")
        if is_blank(activity.assessment_rubric):
            raise ValidationError(f"Assessment rubric is required for activity ID: {activity_id}")

        prompt = build_assessment_prompt(course, activity, assessment, re_assessment_comment=comment)
        generation = await self.invoker.generate(prompt)
        grading = parse_grading_response(generation)
        merge_grading(assessment, generation, grading, GradingBranch.RE_ASSESSMENT, teacher_comment=comment)
        self.gateway.save_assessment(activity_id, student_id, assessment)
        logger.info("Re-assessed student %s for activity %s", student_id, activity_id)
        return Result.ok(assessment)
