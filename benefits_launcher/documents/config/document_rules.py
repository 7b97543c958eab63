""" Document requirement rules: which uploads a company needs before submitting... """


# Conditions understood by the evaluator
CONDITION_PRIOR_COVERAGE        =   "hasPriorCoverage"
CONDITION_LARGE_GROUP           =   "employeeCount > 50"
CONDITION_MISSING_DE9C          =   "missingDE9C"

LARGE_GROUP_THRESHOLD           =   50


DOCUMENT_RULES = {
    # Any one of these proves payroll
    "payProof": {
        "label": "Proof of Payroll",
        "oneOf": [
            {"type": "DE9C", "label": "DE-9C Quarterly Wage Report"},
            {"type": "Payroll Report", "label": "Payroll Register"},
            {"type": "Wage and Tax Statement", "label": "W-2 / 1099 Wage and Tax Statements"}
        ]
    },

    # Any one of these proves the business exists
    "businessDocs": {
        "label": "Business Documents",
        "oneOf": [
            {"type": "Business License", "label": "Business License"},
            {"type": "Articles of Incorporation", "label": "Articles of Incorporation"},
            {"type": "Statement of Information", "label": "Statement of Information"},
            {"type": "Fictitious Business Name", "label": "Fictitious Business Name Statement"}
        ]
    },

    "priorCoverage": {
        "label": "Prior Coverage Documents",
        "condition": CONDITION_PRIOR_COVERAGE,
        "required": [
            {"type": "Current Carrier Bill", "label": "Most Recent Carrier Bill"},
            {"type": "Renewal Notice", "label": "Current Carrier Renewal"}
        ]
    },

    "carrierSpecific": {
        "Anthem": [
            {"type": "Anthem-Group-App", "label": "Anthem Group Application"}
        ],
        "Blue Shield": [
            {"type": "BlueShield-MasterGroup-App", "label": "Blue Shield Master Group Application"},
            {"type": "BlueShield-RefusalOfCoverage", "label": "Blue Shield Refusal of Coverage Form"},
            {
                "type": "Payroll Records",
                "label": "Payroll Records (when no DE-9C is on file)",
                "condition": CONDITION_MISSING_DE9C
            }
        ],
        "Kaiser": [
            {"type": "Kaiser-GroupApp", "label": "Kaiser Permanente Group Application"}
        ],
        "UnitedHealthcare": [
            {"type": "UHC-GroupApp", "label": "UnitedHealthcare Group Application"},
            {"type": "UHC-EmployerApp", "label": "UnitedHealthcare Employer Application", "required": False}
        ]
    },

    "employeeCount": {
        "label": "Large Group Documents",
        "condition": CONDITION_LARGE_GROUP,
        "required": [
            {"type": "Form 941", "label": "IRS Form 941 Quarterly Federal Tax Return"}
        ]
    }
}
