# Models package - database models
from leadflow.models.user import User
from leadflow.models.lead import Lead
from leadflow.models.opportunity import Opportunity
