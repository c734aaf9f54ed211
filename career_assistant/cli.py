"""
Career Assistant CLI - Command line interface for the career assistant.

Usage:
    python -m career_assistant [command] [options]

Commands:
    cv            Build an ATS-optimized CV from form data
    cover-letter  Write a tailored cover letter
    optimize      Score a resume against a job description
    interview     Practice a mock interview
    coach         Skill gap analysis, learning paths and career advice
    chat          Chat with the AI career coach
    jobs          Search job listings
    alerts        Manage saved job alerts
    portfolio     Generate, export and publish a portfolio site
    profile       View and edit your profile
    auth          Sign up, sign in and sign out
    db            Check the database setup
    config        Manage configuration

Examples:
    python -m career_assistant cv --input my_cv.json --format html --save
    python -m career_assistant cover-letter --company Acme --position "Data Engineer" --url https://...
    python -m career_assistant optimize --job-file job.txt --resume resume.pdf
    python -m career_assistant interview --role "Backend Developer"
    python -m career_assistant coach gaps --target-role "Data Scientist" --skills "Python, SQL" --save
    python -m career_assistant alerts create --title "Remote React" --keywords React --remote remote
"""

from getpass import getpass
from pathlib import Path
from typing import Optional
import argparse
import json
import logging
import sys

from career_assistant.ai import get_completion_client
from career_assistant.coaching import CareerCoach, ChatBot, MockInterviewer, ResumeOptimizer
from career_assistant.core import (
    AuthUser,
    CoverLetterRequest,
    FormState,
    JobAlert,
    Notification,
    PortfolioTemplate,
    Tone,
)
from career_assistant.generators import CoverLetterWriter, CVGenerator, DocumentManager, PortfolioBuilder
from career_assistant.integrations import JobAggregator
from career_assistant.storage import (
    AuthSession,
    JobAlertRepository,
    LocalBackend,
    PortfolioRepository,
    ProfileRepository,
    SupabaseBackend,
    check_schema,
)
from career_assistant.utils import Config


SCHEMA_PATH = Path(__file__).parent / "data" / "schema.sql"

# Stands in for the signed-in user when the local backend is used
LOCAL_USER = AuthUser(id="local-user", email="me@localhost")


def main(argv: Optional[list[str]] = None):
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Career Assistant - AI-powered CVs, cover letters, interview practice and job search",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--verbose", "-v", action="store_true", help="Show debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # CV command
    cv_parser = subparsers.add_parser("cv", help="Build an ATS-optimized CV")
    cv_parser.add_argument("--input", "-i", required=True, help="CV form data (JSON)")
    cv_parser.add_argument("--format", "-f", choices=["markdown", "html", "txt"], help="Output format")
    cv_parser.add_argument("--no-ai", action="store_true", help="Render without AI enhancement")
    cv_parser.add_argument("--save", action="store_true", help="Save to the output directory")

    # Cover letter command
    cl_parser = subparsers.add_parser("cover-letter", help="Write a cover letter")
    cl_parser.add_argument("--company", "-c", required=True, help="Company name")
    cl_parser.add_argument("--position", "-p", required=True, help="Position title")
    cl_parser.add_argument("--description", "-d", default="", help="Job description text")
    cl_parser.add_argument("--description-file", help="File containing the job description")
    cl_parser.add_argument("--url", "-u", default="", help="Job posting URL")
    cl_parser.add_argument("--tone", "-t", choices=[t.value for t in Tone], default=Tone.PROFESSIONAL.value)
    cl_parser.add_argument("--name", "-n", help="Your name (for the signature)")
    cl_parser.add_argument("--save", action="store_true", help="Save to the output directory")

    # Optimize command
    opt_parser = subparsers.add_parser("optimize", help="Score a resume against a job")
    opt_parser.add_argument("--job", "-j", default="", help="Job description text")
    opt_parser.add_argument("--job-file", help="File containing the job description")
    opt_parser.add_argument("--resume", "-r", required=True, help="Resume file (pdf, docx, txt, md)")
    opt_parser.add_argument("--save", action="store_true", help="Save the analysis as JSON")

    # Interview command
    int_parser = subparsers.add_parser("interview", help="Practice a mock interview")
    int_parser.add_argument("--role", "-r", help="Role to practice for")
    int_parser.add_argument("--list-roles", action="store_true", help="List suggested roles")

    # Coach command
    coach_parser = subparsers.add_parser("coach", help="Career coaching")
    coach_sub = coach_parser.add_subparsers(dest="coach_command")

    gaps_parser = coach_sub.add_parser("gaps", help="Skill gap analysis")
    gaps_parser.add_argument("--current-role", default="")
    gaps_parser.add_argument("--target-role", required=True)
    gaps_parser.add_argument("--experience", default="")
    gaps_parser.add_argument("--skills", required=True, help="Comma-separated skills")
    gaps_parser.add_argument("--goals", default="")
    gaps_parser.add_argument("--save", action="store_true", help="Save the analysis as JSON (usable as --context-file)")

    path_parser = coach_sub.add_parser("path", help="Learning path to a target role")
    path_parser.add_argument("--skills", default="", help="Comma-separated skills")
    path_parser.add_argument("--target-role", required=True)

    advice_parser = coach_sub.add_parser("advice", help="Ask a career question")
    advice_parser.add_argument("question", help="Your question")
    advice_parser.add_argument("--context-file", help="JSON file sent as context, e.g. a saved skill gap analysis")

    # Chat command
    chat_parser = subparsers.add_parser("chat", help="Chat with the AI career coach")
    chat_parser.add_argument("--context-file", help="JSON file sent as context with every message")

    # Jobs command
    jobs_parser = subparsers.add_parser("jobs", help="Search job listings")
    jobs_parser.add_argument("--keywords", "-k", required=True, help="Job title or skills")
    jobs_parser.add_argument("--location", "-l", help="Location filter")
    jobs_parser.add_argument("--sources", help="Comma-separated providers (linkedin, indeed)")
    jobs_parser.add_argument("--limit", "-n", type=int, default=25, help="Max results per provider")

    # Alerts command
    alerts_parser = subparsers.add_parser("alerts", help="Manage job alerts")
    alerts_sub = alerts_parser.add_subparsers(dest="alerts_command")
    alerts_sub.add_parser("list", help="List your alerts")

    create_parser = alerts_sub.add_parser("create", help="Create an alert")
    create_parser.add_argument("--title", required=True)
    create_parser.add_argument("--keywords", required=True)
    create_parser.add_argument("--location", default="")
    create_parser.add_argument("--experience-level", default="")
    create_parser.add_argument("--job-type", default="")
    create_parser.add_argument("--remote", dest="remote_filter", default="")

    for action, help_text in (
        ("delete", "Delete an alert"),
        ("pause", "Pause an alert"),
        ("resume", "Resume an alert"),
        ("run", "Search jobs with an alert's filters"),
    ):
        action_parser = alerts_sub.add_parser(action, help=help_text)
        action_parser.add_argument("alert_id")

    # Portfolio command
    pf_parser = subparsers.add_parser("portfolio", help="Build your portfolio")
    pf_parser.add_argument("--resume", "-r", help="Resume file to build from (default: sample)")
    pf_parser.add_argument("--template", "-t", choices=[t.value for t in PortfolioTemplate],
                           default=PortfolioTemplate.MODERN.value)
    pf_parser.add_argument("--export", "-e", help="Write the portfolio as an HTML file")
    pf_parser.add_argument("--publish", action="store_true", help="Publish to your portfolio URL")
    pf_parser.add_argument("--show", action="store_true", help="Show your saved portfolio")

    # Profile command
    profile_parser = subparsers.add_parser("profile", help="View and edit your profile")
    profile_parser.add_argument("--name")
    profile_parser.add_argument("--title")
    profile_parser.add_argument("--summary")
    profile_parser.add_argument("--add-skill", action="append", default=[])
    profile_parser.add_argument("--remove-skill", action="append", default=[])

    # Auth command
    auth_parser = subparsers.add_parser("auth", help="Sign up, sign in and sign out")
    auth_sub = auth_parser.add_subparsers(dest="auth_command")
    signup_parser = auth_sub.add_parser("signup", help="Create an account")
    signup_parser.add_argument("--email", required=True)
    signup_parser.add_argument("--name", default="")
    signin_parser = auth_sub.add_parser("signin", help="Sign in")
    signin_parser.add_argument("--email", required=True)
    auth_sub.add_parser("signout", help="Sign out")
    auth_sub.add_parser("whoami", help="Show the signed-in user")

    # Database command
    db_parser = subparsers.add_parser("db", help="Database setup")
    db_parser.add_argument("--check", action="store_true", help="Check that the tables exist")
    db_parser.add_argument("--schema", action="store_true", help="Print the schema SQL")

    # Config command
    config_parser = subparsers.add_parser("config", help="Manage configuration")
    config_parser.add_argument("--show", action="store_true", help="Show current config")
    config_parser.add_argument("--set", nargs=2, metavar=("KEY", "VALUE"), help="Set a config value")
    config_parser.add_argument("--set-api-key", nargs=2, metavar=("PROVIDER", "KEY"), help="Set API key")
    config_parser.add_argument("--init", action="store_true", help="Initialize default config")

    # Parse arguments
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    # Load configuration
    config = Config(args.config)

    commands = {
        "cv": cmd_cv,
        "cover-letter": cmd_cover_letter,
        "optimize": cmd_optimize,
        "interview": cmd_interview,
        "coach": cmd_coach,
        "chat": cmd_chat,
        "jobs": cmd_jobs,
        "alerts": cmd_alerts,
        "portfolio": cmd_portfolio,
        "profile": cmd_profile,
        "auth": cmd_auth,
        "db": cmd_db,
        "config": cmd_config,
    }

    # Execute command
    try:
        commands[args.command](args, config)
    except KeyboardInterrupt:
        print("\n\nOperation cancelled.")
        sys.exit(1)
    except Exception as e:
        print(f"\nError: {e}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def print_notification(notification: Notification) -> None:
    mark = "❌" if notification.is_error else "✅"
    text = f"{mark} {notification.title}"
    if notification.description:
        text += f": {notification.description}"
    print(text)


def make_form(name: str) -> FormState:
    return FormState(name, on_notify=print_notification)


def make_backend(config: Config):
    settings = config.get_backend_config()
    if settings["type"] == "local":
        return LocalBackend(settings["data_dir"])
    return SupabaseBackend(settings["url"], settings["anon_key"])


def current_user(config: Config, backend) -> AuthUser:
    if isinstance(backend, LocalBackend):
        return LOCAL_USER
    return AuthSession(backend, config.get_session_path()).require_user()


def read_text_arg(text: str, path: Optional[str]) -> str:
    if path:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    return text


def read_context(path: Optional[str]) -> Optional[dict]:
    if not path:
        return None
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    return data if isinstance(data, dict) else {"context": data}


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def cmd_cv(args, config: Config):
    """Execute cv command."""
    print("📝 Building your CV...")
    cv = CVGenerator.load(args.input)
    generator = CVGenerator(get_completion_client(config))

    if not args.no_ai:
        form = make_form("cv")
        enhanced = form.submit(
            generator.generate,
            cv,
            success=lambda _: ("CV Generated!", "Your ATS-optimized CV is ready for download."),
            failure=("Error", "Failed to generate CV. Please try again."),
        )
        if enhanced is None:
            return
        cv = enhanced

    fmt = args.format or config.get("generation.default_format", "markdown")
    document = generator.render(cv, fmt)

    if args.save:
        manager = DocumentManager(config.get_output_dir())
        path = manager.save("cv", cv.personal_info.name or "cv", document, fmt)
        print(f"💾 Saved CV to {path}")
    else:
        print()
        print(document)


def cmd_cover_letter(args, config: Config):
    """Execute cover-letter command."""
    print(f"✉️  Writing cover letter for {args.position} at {args.company}...")
    request = CoverLetterRequest(
        company=args.company,
        position=args.position,
        job_description=read_text_arg(args.description, args.description_file),
        job_url=args.url,
        tone=Tone(args.tone),
    )
    writer = CoverLetterWriter(get_completion_client(config))

    form = make_form("cover-letter")
    letter = form.submit(
        writer.generate,
        request,
        applicant_name=args.name,
        success=lambda _: ("Cover Letter Generated!", "Your personalized cover letter is ready."),
        failure=("Error", "Failed to generate cover letter. Please try again."),
    )
    if letter is None:
        return

    if args.save:
        manager = DocumentManager(config.get_output_dir())
        path = manager.save("cover_letter", f"{args.company}_{args.position}", letter, "txt")
        print(f"💾 Saved cover letter to {path}")
    else:
        print()
        print(letter)


def cmd_optimize(args, config: Config):
    """Execute optimize command."""
    print("🎯 Analyzing your resume...")
    job_description = read_text_arg(args.job, args.job_file)
    optimizer = ResumeOptimizer(get_completion_client(config))

    form = make_form("optimize")
    result = form.submit(
        optimizer.optimize_file,
        job_description,
        args.resume,
        success=lambda r: ("Analysis Complete!", f"Your resume scored {r.match_score}% match with the job."),
        failure=("Error", "Failed to analyze resume. Please try again."),
    )
    if result is None:
        return

    print(f"\n📊 Match Score: {result.match_score}%")
    if result.strength_keywords:
        print(f"   ✅ Strengths: {', '.join(result.strength_keywords)}")
    if result.missing_keywords:
        print(f"   ❌ Missing Keywords: {', '.join(result.missing_keywords)}")

    if result.suggestions:
        print("\n💡 Suggestions:")
        for s in result.suggestions:
            print(f"\n   [{s.impact.upper()}] {s.section}")
            if s.current:
                print(f"   Current:   {s.current}")
            print(f"   Suggested: {s.suggested}")

    for improvement in result.improvements:
        print(f"\n🔧 {improvement.category}")
        for item in improvement.items:
            print(f"   - {item}")

    if args.save:
        manager = DocumentManager(config.get_output_dir())
        path = manager.save("analysis", "resume_optimization", result.to_dict(), "json")
        print(f"\n💾 Saved analysis to {path}")


def cmd_interview(args, config: Config):
    """Execute interview command."""
    if args.list_roles or not args.role:
        print("Suggested roles:")
        for role in MockInterviewer.ROLES:
            print(f"  - {role}")
        if not args.role:
            print("\nStart with: career-assistant interview --role \"Frontend Developer\"")
        return

    interviewer = MockInterviewer(get_completion_client(config))
    form = make_form("interview")

    session = form.submit(
        interviewer.start,
        args.role,
        success=lambda s: ("Interview Started!", f"Answer {len(s.questions)} questions. Take your time."),
        failure=("Error", "Failed to generate questions. Please try again."),
    )
    if session is None:
        return

    question = session.current_question
    while question is not None:
        number = session.current_question_index + 1
        print(f"\nQuestion {number} of {len(session.questions)} ({question.type.value}, "
              f"~{question.expected_duration // 60} min)")
        print(f"  {question.question}")
        answer = input("\nYour answer (blank line to skip): ").strip()
        question = interviewer.answer(session, answer)

    print("\n🎤 Interview complete. Analyzing your performance...")
    analysis = form.submit(
        interviewer.analyze,
        session,
        success=lambda a: ("Analysis Complete!", f"Overall score: {a.overall_score}%"),
        failure=("Error", "Failed to analyze interview. Please try again."),
    )
    if analysis is None:
        return

    print(f"\n📈 Overall: {analysis.overall_score}% | Communication: {analysis.communication_score}% | "
          f"Confidence: {analysis.confidence_score}% | Content: {analysis.content_score}%")
    for feedback in analysis.feedback:
        print(f"\n❓ {feedback.question} ({feedback.score}%)")
        for strength in feedback.strengths:
            print(f"   ✅ {strength}")
        for improvement in feedback.improvements:
            print(f"   🔧 {improvement}")
    if analysis.tips:
        print("\n💡 Tips:")
        for tip in analysis.tips:
            print(f"   - {tip}")


def cmd_coach(args, config: Config):
    """Execute coach command."""
    coach = CareerCoach(get_completion_client(config))
    form = make_form("coach")

    if args.coach_command == "gaps":
        analysis = form.submit(
            coach.analyze_skill_gaps,
            args.current_role,
            args.target_role,
            args.experience,
            args.skills,
            args.goals,
            success=lambda _: ("Analysis Complete!", "Your personalized career analysis is ready."),
            failure=("Error", "Failed to analyze skills. Please try again."),
        )
        if analysis is None:
            return

        print(f"\n🎯 Target role: {analysis.target_role}")
        if analysis.strength_areas:
            print(f"   ✅ Strengths: {', '.join(analysis.strength_areas)}")
        if analysis.missing_skills:
            print("\n📚 Skills to develop:")
            for skill in analysis.missing_skills:
                print(f"   - {skill.skill} [{skill.importance}] ~{skill.time_to_learn}")
                for resource in skill.resources:
                    print(f"       · {resource}")
        if analysis.recommendations:
            print("\n💡 Recommendations:")
            for recommendation in analysis.recommendations:
                print(f"   - {recommendation}")
        _print_learning_path(analysis.learning_path)

        if args.save:
            manager = DocumentManager(config.get_output_dir())
            path = manager.save("analysis", f"skill_gaps_{args.target_role}", analysis.to_dict(), "json")
            print(f"\n💾 Saved analysis to {path}")
            print(f"   Ask follow-up questions with: coach advice \"...\" --context-file {path}")

    elif args.coach_command == "path":
        phases = form.submit(
            coach.learning_path,
            args.skills,
            args.target_role,
            success=lambda p: ("Learning Path Ready!", f"{len(p)} phases to {args.target_role}."),
        )
        if phases is not None:
            _print_learning_path(phases)

    elif args.coach_command == "advice":
        answer = form.submit(coach.advice, args.question, read_context(args.context_file))
        if answer is not None:
            print(f"\n{answer}")

    else:
        print("Use 'coach gaps', 'coach path', or 'coach advice'")


def _print_learning_path(phases):
    if not phases:
        return
    print("\n🗺️  Learning path:")
    for i, phase in enumerate(phases, 1):
        print(f"\n   {i}. {phase.phase} ({phase.duration})")
        if phase.skills:
            print(f"      Skills: {', '.join(phase.skills)}")
        if phase.projects:
            print(f"      Projects: {', '.join(phase.projects)}")


def cmd_chat(args, config: Config):
    """Execute chat command."""
    bot = ChatBot(CareerCoach(get_completion_client(config)), context=read_context(args.context_file))
    form = make_form("chat")

    print(f"🤖 {bot.messages[0].content}")
    print("   (type 'exit' to quit)\n")

    while True:
        text = input("You: ").strip()
        if text.lower() in ("exit", "quit"):
            break
        reply = form.submit(
            bot.send,
            text,
            failure=("Error", "Failed to get response. Please try again."),
        )
        if reply is not None:
            print(f"\n🤖 {reply.content}\n")


def cmd_jobs(args, config: Config):
    """Execute jobs command."""
    print(f"🔍 Searching for '{args.keywords}' jobs...")
    sources = [s.strip() for s in args.sources.split(",")] if args.sources else None
    aggregator = JobAggregator()

    form = make_form("jobs")
    jobs = form.submit(
        aggregator.search_jobs,
        args.keywords,
        args.location,
        sources,
        limit=args.limit,
        success=lambda j: ("Jobs Found!", f"Found {len(j)} matching positions."),
        failure=("Error", "Failed to search jobs. Please try again."),
    )
    if jobs:
        _print_jobs(jobs)


def _print_jobs(jobs):
    print()
    for i, job in enumerate(jobs, 1):
        score = f" | Match: {job.match_score}%" if job.match_score is not None else ""
        salary = f" | {job.salary}" if job.salary else ""
        print(f"{i:2}. {job.position}")
        print(f"    {job.company} | {job.location}{salary}")
        print(f"    {job.source} | {job.ago_time}{score}")
        print(f"    {job.job_url}")
        print()


def cmd_alerts(args, config: Config):
    """Execute alerts command."""
    backend = make_backend(config)
    user = current_user(config, backend)
    repository = JobAlertRepository(backend)
    form = make_form("alerts")

    if args.alerts_command == "create":
        alert = JobAlert(
            title=args.title,
            keywords=args.keywords,
            location=args.location,
            experience_level=args.experience_level,
            job_type=args.job_type,
            remote_filter=args.remote_filter,
        )
        form.submit(
            repository.create,
            user.id,
            alert,
            success=lambda a: ("Job Alert Created!", f"You'll be notified of new {a.title} positions."),
            failure=("Error", "Failed to create job alert"),
        )

    elif args.alerts_command == "delete":
        form.submit(
            repository.delete,
            user.id,
            args.alert_id,
            success=lambda _: ("Job Alert Deleted", "The job alert has been removed."),
            failure=("Error", "Failed to delete job alert"),
        )

    elif args.alerts_command in ("pause", "resume"):
        active = args.alerts_command == "resume"
        form.submit(
            repository.toggle,
            user.id,
            args.alert_id,
            active,
            success=lambda _: (f"Job Alert {'Activated' if active else 'Paused'}",
                               f"Job alert has been {'activated' if active else 'paused'}."),
            failure=("Error", "Failed to update job alert"),
        )

    elif args.alerts_command == "run":
        alert = next((a for a in repository.list(user.id) if a.id == args.alert_id), None)
        if alert is None:
            print(f"❌ Job alert {args.alert_id} not found")
            return
        jobs = form.submit(
            JobAggregator().search_jobs,
            alert.keywords,
            alert.location or None,
            experience_level=alert.experience_level or None,
            job_type=alert.job_type or None,
            remote_filter=alert.remote_filter or None,
            success=lambda j: ("Jobs Found!", f"Found {len(j)} matching positions."),
        )
        if jobs:
            _print_jobs(jobs)

    else:
        alerts = form.submit(repository.list, user.id)
        if alerts is None:
            return
        if not alerts:
            print("No job alerts yet. Create one with 'alerts create --title ... --keywords ...'")
            return
        print(f"\n🔔 Job Alerts ({len(alerts)})\n")
        for alert in alerts:
            status = "active" if alert.is_active else "paused"
            filters = [f for f in (alert.location, alert.experience_level, alert.job_type, alert.remote_filter) if f]
            print(f"{alert.title} [{status}]")
            print(f"   Keywords: {alert.keywords}" + (f" | {' | '.join(filters)}" if filters else ""))
            print(f"   ID: {alert.id}")
            print()


def cmd_portfolio(args, config: Config):
    """Execute portfolio command."""
    backend = make_backend(config) if (args.publish or args.show) else None
    repository = PortfolioRepository(backend) if backend else None
    builder = PortfolioBuilder(get_completion_client(config), repository=repository)
    template = PortfolioTemplate(args.template)

    if args.show:
        user = current_user(config, backend)
        portfolio = repository.get(user.id)
        if portfolio is None:
            print("No portfolio saved yet. Run 'portfolio --publish' to create one.")
            return
        status = "published" if portfolio.is_published else "draft"
        print(f"\n🌐 Portfolio ({portfolio.template}, {status})")
        if portfolio.url:
            print(f"   {portfolio.url}")
        print(json.dumps(portfolio.content, indent=2))
        return

    print("🛠️  Generating portfolio...")
    form = make_form("portfolio")
    if args.resume:
        content = form.submit(
            builder.from_resume_file,
            args.resume,
            success=lambda c: ("Portfolio Generated!", "Your AI-powered portfolio is ready."),
        )
    else:
        content = form.submit(
            builder.generate,
            "sample",
            success=lambda c: ("Portfolio Generated!", "Your AI-powered portfolio is ready."),
        )
    if content is None:
        return

    print(f"\n👤 {content.name} - {content.title}")
    if content.skills:
        print(f"   Skills: {', '.join(content.skills)}")
    print(f"   Projects: {len(content.projects)} | Experience: {len(content.experience)}")

    if args.export:
        with open(args.export, 'w', encoding='utf-8') as f:
            f.write(builder.export_html(content, template))
        print(f"💾 Exported portfolio to {args.export}")

    if args.publish:
        user = current_user(config, backend)
        form.submit(
            builder.publish,
            user.id,
            content,
            template,
            success=lambda p: ("Portfolio Published!", f"Your portfolio is live at {p.url}"),
            failure=("Error", "Failed to publish portfolio. Please try again."),
        )


def cmd_profile(args, config: Config):
    """Execute profile command."""
    backend = make_backend(config)
    user = current_user(config, backend)
    repository = ProfileRepository(backend)
    form = make_form("profile")

    profile = form.submit(repository.get, user, failure=("Error", "Failed to load profile"))
    if profile is None:
        return

    changed = False
    for field_name in ("name", "title", "summary"):
        value = getattr(args, field_name)
        if value is not None:
            setattr(profile, field_name, value)
            changed = True
    for skill in args.add_skill:
        changed = repository.add_skill(profile, skill) or changed
    for skill in args.remove_skill:
        changed = repository.remove_skill(profile, skill) or changed

    if changed:
        saved = form.submit(
            repository.save,
            profile,
            success=lambda _: ("Success", "Profile updated successfully! 🎉"),
            failure=("Error", "Failed to save profile"),
        )
        if saved is None:
            return
        profile = saved

    print(f"\n👤 {profile.name}")
    print(f"   Email: {profile.email}")
    if profile.title:
        print(f"   Title: {profile.title}")
    if profile.summary:
        print(f"   Summary: {profile.summary}")
    print(f"   Skills: {', '.join(profile.skills) if profile.skills else '(none)'}")


def cmd_auth(args, config: Config):
    """Execute auth command."""
    backend = make_backend(config)
    if isinstance(backend, LocalBackend):
        print("The local backend needs no sign in. Set backend.type to 'supabase' to use accounts.")
        return

    auth = AuthSession(backend, config.get_session_path(), profiles=ProfileRepository(backend))
    form = make_form("auth")

    if args.auth_command == "signup":
        password = getpass("Password: ")
        form.submit(
            auth.sign_up,
            args.email,
            password,
            args.name,
            success=lambda u: ("Account created!", f"Welcome, {u.email}. Check your email to confirm."),
        )

    elif args.auth_command == "signin":
        password = getpass("Password: ")
        form.submit(
            auth.sign_in,
            args.email,
            password,
            success=lambda u: ("Signed in", f"Welcome back, {u.email}"),
        )

    elif args.auth_command == "signout":
        auth.sign_out()
        print("✅ Signed out")

    else:
        user = form.submit(auth.current_user)
        if user:
            print(f"Signed in as {user.email} ({user.id})")
        else:
            print("Not signed in")


def cmd_db(args, config: Config):
    """Execute db command."""
    if args.schema:
        print(SCHEMA_PATH.read_text(encoding='utf-8'))
        return

    backend = make_backend(config)
    missing = check_schema(backend)
    if not missing:
        print(f"✅ All tables are set up on {backend.name}")
        return

    print(f"❌ Missing tables: {', '.join(missing)}\n")
    print("To use all features you need to set up the required database tables in Supabase:")
    print("  1. Go to your Supabase project dashboard (https://supabase.com/dashboard)")
    print("  2. Navigate to the SQL Editor")
    print(f"  3. Run the schema script ({SCHEMA_PATH}, or 'career-assistant db --schema')")
    print("  4. Make sure Row Level Security (RLS) is enabled for all tables")


def cmd_config(args, config: Config):
    """Execute config command."""
    if args.init:
        config.save()
        print(f"✅ Created config at: {config.config_path}")

    elif args.show:
        print("\n📋 Current Configuration\n")
        config.print_config()

    elif args.set:
        key, value = args.set
        # Try to parse as JSON for numbers and booleans
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass

        config.set(key, value)
        config.save()
        print(f"✅ Set {key} = {value}")

    elif args.set_api_key:
        provider, key = args.set_api_key
        config.set_api_key(provider, key)
        print(f"✅ Set API key for {provider}")

    else:
        print("Use --show, --set, --set-api-key, or --init")


if __name__ == "__main__":
    main()
