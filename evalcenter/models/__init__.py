from .job import Job
from .applicant import Applicant
from .question import Question
from .evaluation_outcome import EvaluationOutcome
