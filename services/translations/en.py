# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.warning": "Warning",
    "dialog.success": "Success",
    "dialog.confirm": "Confirm",

    # Buttons
    "button.continue": "Continue",
    "button.back": "Back",
    "button.add": "Add",
    "button.remove": "Remove",
    "button.dismiss": "Dismiss",
    "button.skip_invites": "Skip for now",
    "button.create_account": "Create Account",
    "button.create_account_with_invites": "Create Account & Save {count} Invite{plural}",
    "button.creating_account": "Creating Account...",

    # Signup wizard - header
    "signup.title": "Join StartupFlo",
    "signup.subtitle": "Set up your account and start managing your business",
    "signup.progress": "Step {current} of {total}",
    "signup.step.account.title": "Account",
    "signup.step.account.description": "Create your account",
    "signup.step.profile.title": "Profile",
    "signup.step.profile.description": "Personal information",
    "signup.step.company.title": "Company",
    "signup.step.company.description": "Company details",
    "signup.step.team.title": "Team",
    "signup.step.team.description": "Invite your team",

    # Step 1 - Credentials
    "signup.credentials.email": "Email Address",
    "signup.credentials.email_placeholder": "Enter your email address",
    "signup.credentials.password": "Password",
    "signup.credentials.password_placeholder": "Create a strong password",
    "signup.credentials.password_hint": "Must be at least 8 characters long",
    "signup.credentials.confirm_password": "Confirm Password",
    "signup.credentials.confirm_placeholder": "Confirm your password",
    "signup.credentials.show_password": "Show passwords",

    # Step 2 - Profile
    "signup.profile.intro": "Tell us a bit about yourself to personalize your experience",
    "signup.profile.first_name": "First Name",
    "signup.profile.last_name": "Last Name",
    "signup.profile.job_title": "Job Title",
    "signup.profile.job_title_placeholder": "e.g. CEO, Product Manager",
    "signup.profile.phone": "Phone Number",

    # Step 3 - Company
    "signup.company.intro": "Help us understand your business to customize your experience",
    "signup.company.name": "Company Name *",
    "signup.company.name_placeholder": "Enter your company name",
    "signup.company.industry": "Industry *",
    "signup.company.size": "Company Size *",
    "signup.company.country": "Country *",
    "signup.company.website": "Website (Optional)",
    "signup.company.founded_year": "Founded Year *",
    "signup.company.revenue": "Annual Revenue Range",
    "signup.company.business_type": "Business Type *",
    "signup.company.timezone": "Timezone *",
    "signup.company.currency": "Currency *",
    "signup.company.phone": "Company Phone",
    "signup.company.address": "Address",
    "signup.company.city": "City",
    "signup.company.state": "State / Province",
    "signup.company.postal_code": "Postal Code",
    "signup.company.select_placeholder": "Select...",

    # Step 4 - Team
    "signup.team.intro": "Invite your team to collaborate on StartupFlo. You can always do this later.",
    "signup.team.add_member": "Add Team Member",
    "signup.team.email": "Email",
    "signup.team.name": "Name (Optional)",
    "signup.team.role": "Role",
    "signup.team.email_placeholder": "colleague@company.com",
    "signup.team.name_placeholder": "Full name",
    "signup.team.members": "Team Members ({count})",
    "signup.team.example": "Example",
    "signup.team.success_title": "Welcome to StartupFlo!",
    "signup.team.success_message": "Your account has been created successfully.",
    "signup.team.success_invites": "Team invitations will be sent to {count} team member{plural} once you're set up.",

    # Validation - Step 1
    "validation.email_required": "Email is required",
    "validation.email_invalid": "Please enter a valid email address",
    "validation.password_required": "Password is required",
    "validation.password_too_short": "Password must be at least {min} characters long",
    "validation.confirm_required": "Please confirm your password",
    "validation.passwords_mismatch": "Passwords do not match",

    # Validation - Step 2
    "validation.first_name_required": "First name is required",
    "validation.last_name_required": "Last name is required",
    "validation.job_title_required": "Job title is required",
    "validation.phone_required": "Phone number is required",

    # Validation - Step 3
    "validation.company_name_required": "Company name is required",
    "validation.industry_required": "Please select an industry",
    "validation.company_size_required": "Please select company size",
    "validation.country_required": "Please select your country",
    "validation.timezone_required": "Please select your timezone",
    "validation.currency_required": "Please select your currency",
    "validation.founded_year_required": "Please select the year your company was founded",
    "validation.business_type_required": "Please select your business type",

    # Submission
    "error.signup.failed": "Failed to create account",
    "error.signup.unexpected_response": "The server sent an unexpected response. Please try again.",
    "error.unknown_route": "Page not found: {route}",

    # Home
    "home.title": "Welcome to StartupFlo",
    "home.signed_in_as": "Signed in as {name}",
}
