# -*- coding: utf-8 -*-
"""
Company Step - Step 3 of the Signup Wizard.

Collects the company profile. Required: name, industry, size, country,
timezone, currency, founded year and business type. The rest is optional.
"""

from PyQt5.QtWidgets import QGridLayout, QLabel, QScrollArea, QVBoxLayout, QWidget

from ui.wizards.framework import BaseStep, StepValidationResult
from ui.wizards.signup.steps.form_fields import (
    create_combo, create_line_edit, labeled, select_combo_value
)
from models.signup import (
    BUSINESS_TYPES, COMPANY_SIZES, COUNTRIES, CURRENCIES, INDUSTRIES,
    REVENUE_RANGES, TIMEZONES, founded_years
)
from services.wizard import SignupStepValidator
from services.translation_manager import tr
from app.config import Config


class CompanyStep(BaseStep):
    """Step 3: Company profile."""

    def setup_ui(self):
        intro = QLabel(tr("signup.company.intro"))
        intro.setWordWrap(True)
        intro.setStyleSheet(f"color: {Config.TEXT_LIGHT};")
        self.main_layout.addWidget(intro)

        scroll_area = QScrollArea()
        scroll_area.setWidgetResizable(True)
        scroll_area.setStyleSheet("QScrollArea { border: none; }")

        content = QWidget()
        content_layout = QVBoxLayout(content)
        content_layout.setContentsMargins(0, 0, 8, 0)
        content_layout.setSpacing(12)

        self.company_name_input = create_line_edit(tr("signup.company.name_placeholder"))
        content_layout.addWidget(labeled(tr("signup.company.name"), self.company_name_input))

        # Selections
        self.combos = {
            "industry": create_combo(INDUSTRIES),
            "company_size": create_combo(COMPANY_SIZES),
            "country": create_combo(COUNTRIES),
            "founded_year": create_combo(founded_years()),
            "annual_revenue_range": create_combo(REVENUE_RANGES),
            "business_type": create_combo(BUSINESS_TYPES),
            "timezone": create_combo(TIMEZONES),
            "currency": create_combo(CURRENCIES),
        }
        captions = {
            "industry": tr("signup.company.industry"),
            "company_size": tr("signup.company.size"),
            "country": tr("signup.company.country"),
            "founded_year": tr("signup.company.founded_year"),
            "annual_revenue_range": tr("signup.company.revenue"),
            "business_type": tr("signup.company.business_type"),
            "timezone": tr("signup.company.timezone"),
            "currency": tr("signup.company.currency"),
        }
        grid = QGridLayout()
        grid.setHorizontalSpacing(12)
        grid.setVerticalSpacing(12)
        for position, (key, combo) in enumerate(self.combos.items()):
            grid.addWidget(labeled(captions[key], combo), position // 2, position % 2)
            combo.currentIndexChanged.connect(
                lambda _index, key=key, combo=combo: self.save_to_context({key: combo.currentData() or ""})
            )
        content_layout.addLayout(grid)

        # Free text (optional)
        self.text_inputs = {
            "website": create_line_edit("https://"),
            "phone": create_line_edit(),
            "address": create_line_edit(),
            "city": create_line_edit(),
            "state_province": create_line_edit(),
            "postal_code": create_line_edit(),
        }
        captions = {
            "website": tr("signup.company.website"),
            "phone": tr("signup.company.phone"),
            "address": tr("signup.company.address"),
            "city": tr("signup.company.city"),
            "state_province": tr("signup.company.state"),
            "postal_code": tr("signup.company.postal_code"),
        }
        details = QGridLayout()
        details.setHorizontalSpacing(12)
        details.setVerticalSpacing(12)
        for position, (key, edit) in enumerate(self.text_inputs.items()):
            details.addWidget(labeled(captions[key], edit), position // 2, position % 2)
            edit.textChanged.connect(lambda text, key=key: self.save_to_context({key: text}))
        content_layout.addLayout(details)
        content_layout.addStretch()

        scroll_area.setWidget(content)
        self.main_layout.addWidget(scroll_area, 1)

        self.company_name_input.textChanged.connect(
            lambda text: self.save_to_context({"company_name": text})
        )

    def populate_data(self):
        signup = self.context.signup
        self.company_name_input.setText(signup.company_name)
        for key, combo in self.combos.items():
            select_combo_value(combo, getattr(signup, key))
        for key, edit in self.text_inputs.items():
            edit.setText(getattr(signup, key))

    def validate(self) -> StepValidationResult:
        return self.create_validation_result(
            SignupStepValidator.validate_company(self.context.signup)
        )

    def get_step_title(self) -> str:
        return tr("signup.step.company.title")

    def get_step_description(self) -> str:
        return tr("signup.step.company.description")
