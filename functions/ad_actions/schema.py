"""
Function schemas advertised to the agent for each action group.
"""

USERNAME_PARAMETER = {
    "type": "string",
    "description": "The username of the user to retrieve",
    "required": True,
}

# SSM documents installed on the management instance. The Run Command
# adapter uses the function name as the document name.
DOCUMENT_NAMES = ["AD-GetAllUsers", "AD-GetUserDetails"]

ACTION_GROUP_SCHEMAS = {
    "ExecuteADQuery": {
        "actionGroupName": "ExecuteADQuery",
        "description": "Queries Active Directory via SSM Run Command Documents",
        "functions": [
            {
                "name": "AD-GetAllUsers",
                "description": "Get all users in Active Directory",
            },
            {
                "name": "AD-GetUserDetails",
                "description": "Get details of a specific user in Active Directory",
                "parameters": {"username": USERNAME_PARAMETER},
            },
        ],
    },
    "ExecuteManagedADDataQuery": {
        "actionGroupName": "ExecuteManagedADDataQuery",
        "description": "Queries Active Directory via AWS Directory Service Data API",
        "functions": [
            {
                "name": "AD-GetAllUsers",
                "description": "List all users in Active Directory",
            },
            {
                "name": "AD-GetUserDetails",
                "description": "Get details of a specific user in Active Directory",
                "parameters": {"username": USERNAME_PARAMETER},
            },
            {
                "name": "AD-GetUserGroups",
                "description": "List all groups for a specific user in Active Directory",
                "parameters": {
                    "username": {
                        **USERNAME_PARAMETER,
                        "description": "The username of the user to retrieve groups of",
                    }
                },
            },
        ],
    },
}
