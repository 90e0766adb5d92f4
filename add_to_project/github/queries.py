"""GraphQL documents for the GitHub Projects (v2) API."""

from add_to_project.schemas.project import OwnerType
from add_to_project.utils.constants import MAX_PROJECT_FIELDS


def get_project_id_query(owner_type: OwnerType) -> str:
    """Build the project node ID query for an organization or user owner."""
    return f"""
    query getProject($projectOwnerName: String!, $projectNumber: Int!) {{
      {owner_type.value}(login: $projectOwnerName) {{
        projectV2(number: $projectNumber) {{
          id
        }}
      }}
    }}
    """


GET_CUSTOM_FIELDS_QUERY = f"""
query getCustomField($projectId: ID!) {{
  node(id: $projectId) {{
    ... on ProjectV2 {{
      fields(first: {MAX_PROJECT_FIELDS}) {{
        nodes {{
          ... on ProjectV2SingleSelectField {{
            id
            name
            options {{
              id
              name
            }}
          }}
        }}
      }}
    }}
  }}
}}
"""

ADD_ITEM_MUTATION = """
mutation addIssueToProject($input: AddProjectV2ItemByIdInput!) {
  addProjectV2ItemById(input: $input) {
    item {
      id
    }
  }
}
"""

SET_SINGLE_SELECT_FIELD_MUTATION = """
mutation setSingleSelectField($projectId: ID!, $itemId: ID!, $fieldId: ID!, $optionId: String!) {
  updateProjectV2ItemFieldValue(
    input: {projectId: $projectId, itemId: $itemId, fieldId: $fieldId, value: {singleSelectOptionId: $optionId}}
  ) {
    projectV2Item {
      id
    }
  }
}
"""

ADD_DRAFT_ISSUE_MUTATION = """
mutation addDraftIssueToProject($projectId: ID!, $title: String!) {
  addProjectV2DraftIssue(input: {projectId: $projectId, title: $title}) {
    projectItem {
      id
    }
  }
}
"""
