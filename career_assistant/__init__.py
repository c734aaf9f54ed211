"""
Career Assistant - AI-powered career tools

This application:
1. Builds ATS-optimized CVs from your details
2. Writes cover letters tailored to a job posting and tone
3. Scores your resume against a job description
4. Runs mock interviews and grades your answers
5. Analyzes skill gaps and plans a learning path
6. Searches jobs and keeps saved job alerts
7. Generates and publishes a portfolio site
"""

__version__ = "1.0.0"
__author__ = "Career Assistant"
