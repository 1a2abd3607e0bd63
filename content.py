from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class NavItem:
    id: str
    label: str


@dataclass(frozen=True)
class Link:
    label: str
    url: str


@dataclass(frozen=True)
class Counter:
    label: str
    value: int
    suffix: str = ""


@dataclass(frozen=True)
class SkillLevel:
    name: str
    level: int  # percent


@dataclass(frozen=True)
class SkillGroup:
    name: str
    chips: Tuple[str, ...]
    bars: Tuple[SkillLevel, ...]


@dataclass(frozen=True)
class Project:
    title: str
    desc: str
    stack: Tuple[str, ...]
    github: str = "#"


@dataclass(frozen=True)
class Experience:
    title: str
    period: str
    bullets: Tuple[str, ...]


@dataclass(frozen=True)
class Education:
    degree: str
    summary: str


@dataclass(frozen=True)
class Certification:
    name: str
    note: str = ""


@dataclass(frozen=True)
class Profile:
    name: str
    tagline: str
    bio: str
    about: Tuple[str, ...]
    quote: str
    quick_profile: Tuple[Tuple[str, str], ...]
    email: str
    github: str
    linkedin: str


@dataclass(frozen=True)
class Portfolio:
    profile: Profile
    phrases: Tuple[str, ...]
    counters: Tuple[Counter, ...]
    skill_groups: Tuple[SkillGroup, ...]
    projects: Tuple[Project, ...]
    experience: Tuple[Experience, ...]
    education: Tuple[Education, ...]
    certifications: Tuple[Certification, ...]
    nav: Tuple[NavItem, ...]
    resume_file: str = "resume.pdf"
    section_subtitles: Tuple[Tuple[str, str], ...] = ()

    @property
    def section_ids(self) -> List[str]:
        return ['hero'] + [n.id for n in self.nav]

    def subtitle(self, section_id: str) -> str:
        return dict(self.section_subtitles).get(section_id, "")

    @property
    def contact_links(self) -> List[Link]:
        return [
            Link("Email", f"mailto:{self.profile.email}"),
            Link("GitHub", self.profile.github),
            Link("LinkedIn", self.profile.linkedin),
        ]


NAV_ITEMS = (
    NavItem('about', 'About'),
    NavItem('skills', 'Skills'),
    NavItem('projects', 'Projects'),
    NavItem('experience', 'Experience'),
    NavItem('education', 'Education'),
    NavItem('certifications', 'Certifications'),
    NavItem('contact', 'Contact'),
)


PORTFOLIO = Portfolio(
    profile=Profile(
        name="Mohan Appikatla",
        tagline="Cloud Enthusiast | Azure Cloud Intern | Aspiring Cloud Engineer",
        bio=("Cloud Enthusiast | Azure Cloud Intern | Aspiring Cloud Engineer. Focused on building "
             "scalable, secure, and cost-efficient cloud solutions that bridge innovation with reliability."),
        about=(
            "Currently working as an Azure Cloud Intern at PCS Solution, Pune — gaining hands-on "
            "experience deploying, managing, and optimizing Azure environments.",
            "I focus on building scalable, secure, and cost-efficient cloud solutions. My goal is to "
            "bridge innovation with reliability through strong fundamentals and practical implementation.",
        ),
        quote="I believe great cloud engineers build reliability as much as scalability.",
        quick_profile=(
            ("Role", "Azure Cloud Intern"),
            ("Focus", "Cloud, DevOps"),
            ("Location", "Pune, India"),
            ("Open to", "Cloud/DevOps Roles"),
        ),
        email="mohan.appikatla@example.com",
        github="https://github.com/",
        linkedin="https://www.linkedin.com/",
    ),
    phrases=(
        "Designing scalable experiences in the Azure Cloud.",
        "Turning infrastructure into innovation.",
    ),
    counters=(
        Counter("Years of Learning", 4),
        Counter("Projects", 12),
        Counter("Technologies Used", 18),
        Counter("Certifications", 2),
    ),
    skill_groups=(
        SkillGroup("Cloud",
                   ('Azure', 'Azure DevOps', 'ARM Templates', 'Blob Storage', 'VM Management'),
                   (SkillLevel('Azure', 85), SkillLevel('Azure DevOps', 78), SkillLevel('ARM Templates', 70))),
        SkillGroup("Programming",
                   ('Python', 'SQL', 'JavaScript'),
                   (SkillLevel('Python', 80), SkillLevel('SQL', 72), SkillLevel('JavaScript', 68))),
        SkillGroup("Tools",
                   ('Git', 'Docker', 'Linux', 'VS Code'),
                   (SkillLevel('Git', 82), SkillLevel('Docker', 70), SkillLevel('Linux', 76))),
        SkillGroup("Concepts",
                   ('Networking', 'CI/CD', 'Cloud Security', 'Automation'),
                   (SkillLevel('Networking', 74), SkillLevel('CI/CD', 72), SkillLevel('Cloud Security', 66))),
    ),
    projects=(
        Project('Smart Attendance System using Face Recognition',
                'Automated attendance using real-time facial detection and recognition.',
                ('Python', 'OpenCV', 'Flask')),
        Project('AI-Driven Retail Inventory Management',
                'Computer vision powered stock tracking and demand prediction.',
                ('Computer Vision', 'Data Science')),
        Project('Movie Recommendation using BERT',
                'Semantic recommendations using transformer embeddings.',
                ('NLP', 'Deep Learning')),
        Project('GM Cart E-Commerce Website',
                'Full-stack e-commerce platform with admin dashboard.',
                ('Django', 'SQL', 'Bootstrap')),
    ),
    experience=(
        Experience("Azure Cloud Intern — PCS Solution, Pune", "June 2025 – Present", (
            "Managing and deploying Azure services and virtual environments.",
            "Working with CI/CD pipelines and monitoring tools.",
            "Learning to automate infrastructure provisioning and scaling.",
        )),
    ),
    education=(
        Education("Bachelor of Technology (B.Tech), Computer Science",
                  "Strong foundation in data structures, networking, and cloud computing."),
    ),
    certifications=(
        Certification("Microsoft Certified: Azure Fundamentals (AZ-900)"),
        Certification("Microsoft Certified: Azure Administrator (AZ-104)", "If applicable"),
    ),
    nav=NAV_ITEMS,
    resume_file="mohan_appikatla_resume.pdf",
    section_subtitles=(
        ('about', "A driven and analytical B.Tech graduate passionate about cloud infrastructure, automation, and DevOps."),
        ('skills', "Azure-blue themed, grouped by capability with animated proficiency bars."),
        ('projects', "Minimalist text cards with quick links."),
        ('contact', "Have an opportunity or want to say hi? Drop a note."),
    ),
)
