"""Curated skill dictionary and n-gram term matcher."""

from __future__ import annotations

import re
from collections import Counter

# Canonical skill -> aliases (matched case-insensitively on whole tokens).
SKILLS: dict[str, tuple[str, ...]] = {
    # Languages
    "Python": ("python",),
    "Java": ("java",),
    "JavaScript": ("javascript", "js", "ecmascript"),
    "TypeScript": ("typescript",),
    "C++": ("c++", "cpp"),
    "C#": ("c#", "csharp"),
    "Golang": ("golang", "go lang"),
    "Rust": ("rust",),
    "Ruby": ("ruby",),
    "PHP": ("php",),
    "Kotlin": ("kotlin",),
    "Swift": ("swift",),
    "Scala": ("scala",),
    "SQL": ("sql",),
    "HTML": ("html", "html5"),
    "CSS": ("css", "css3"),
    "MATLAB": ("matlab",),
    # Frameworks and libraries
    "React": ("react", "react.js", "reactjs"),
    "Angular": ("angular",),
    "Vue": ("vue", "vue.js", "vuejs"),
    "Node.js": ("node.js", "nodejs", "node"),
    "Django": ("django",),
    "Flask": ("flask",),
    "FastAPI": ("fastapi",),
    "Spring Boot": ("spring boot",),
    ".NET": ("dotnet", "asp.net"),
    "Pandas": ("pandas",),
    "NumPy": ("numpy",),
    "TensorFlow": ("tensorflow",),
    "PyTorch": ("pytorch",),
    "scikit-learn": ("scikit-learn", "sklearn"),
    "Spark": ("spark", "pyspark", "apache spark"),
    # Data stores
    "PostgreSQL": ("postgresql", "postgres"),
    "MySQL": ("mysql",),
    "MongoDB": ("mongodb", "mongo"),
    "Redis": ("redis",),
    "Elasticsearch": ("elasticsearch",),
    "Snowflake": ("snowflake",),
    "Kafka": ("kafka", "apache kafka"),
    # Cloud and infrastructure
    "AWS": ("aws", "amazon web services"),
    "Azure": ("azure", "microsoft azure"),
    "GCP": ("gcp", "google cloud", "google cloud platform"),
    "Docker": ("docker",),
    "Kubernetes": ("kubernetes", "k8s"),
    "Terraform": ("terraform",),
    "Linux": ("linux",),
    "Git": ("git", "github", "gitlab"),
    "CI/CD": ("ci/cd", "continuous integration", "continuous delivery", "continuous deployment"),
    "Microservices": ("microservices", "microservice"),
    "REST APIs": ("restful", "rest api", "restful apis"),
    "GraphQL": ("graphql",),
    # Data and AI
    "Machine Learning": ("machine learning", "ml"),
    "Deep Learning": ("deep learning",),
    "Artificial Intelligence": ("artificial intelligence", "ai"),
    "Natural Language Processing": ("natural language processing", "nlp"),
    "Computer Vision": ("computer vision",),
    "Data Analysis": ("data analysis", "data analytics"),
    "Data Visualization": ("data visualization",),
    "Statistics": ("statistics", "statistical analysis", "statistical modeling"),
    "ETL": ("etl", "data pipelines", "data pipeline"),
    "Tableau": ("tableau",),
    "Power BI": ("power bi", "powerbi"),
    "Microsoft Excel": ("ms excel", "advanced excel", "excel spreadsheets", "excel vba"),
    "A/B Testing": ("a/b testing", "ab testing", "experimentation"),
    # Engineering disciplines
    "AutoCAD": ("autocad",),
    "SolidWorks": ("solidworks",),
    "CAD": ("cad",),
    "Lean Manufacturing": ("lean manufacturing", "lean production"),
    "Six Sigma": ("six sigma", "lean six sigma"),
    "Quality Assurance": ("quality assurance", "qa"),
    "Supply Chain Management": ("supply chain", "supply chain management", "logistics"),
    # Business, finance and consulting
    "Financial Modeling": ("financial modeling", "financial modelling"),
    "Financial Analysis": ("financial analysis",),
    "Accounting": ("accounting",),
    "GAAP": ("gaap",),
    "Budgeting": ("budgeting", "budget management", "forecasting"),
    "Risk Management": ("risk management",),
    "Compliance": ("compliance", "regulatory compliance"),
    "Project Management": ("project management",),
    "Program Management": ("program management",),
    "Product Management": ("product management",),
    "Agile": ("agile", "scrum", "kanban"),
    "Stakeholder Management": ("stakeholder management", "stakeholder engagement"),
    "Strategic Planning": ("strategic planning", "strategy development", "business strategy"),
    "Change Management": ("change management",),
    "Business Development": ("business development",),
    "Operations Management": ("operations management",),
    "P&L Management": ("p&l", "profit and loss"),
    # Sales and marketing
    "CRM": ("crm",),
    "Salesforce": ("salesforce",),
    "Account Management": ("account management",),
    "Lead Generation": ("lead generation", "prospecting"),
    "Negotiation": ("negotiation", "contract negotiation"),
    "SEO": ("seo", "search engine optimization"),
    "SEM": ("sem", "search engine marketing", "ppc"),
    "Content Marketing": ("content marketing", "content strategy"),
    "Social Media Marketing": ("social media marketing", "social media"),
    "Google Analytics": ("google analytics",),
    "Email Marketing": ("email marketing",),
    "Brand Management": ("brand management", "branding"),
    "Copywriting": ("copywriting",),
    "Merchandising": ("merchandising", "visual merchandising"),
    "Inventory Management": ("inventory management", "inventory control"),
    "Customer Service": ("customer service", "customer experience"),
    "E-commerce": ("e-commerce", "ecommerce"),
    # Design
    "Figma": ("figma",),
    "Sketch": ("sketch",),
    "Adobe Photoshop": ("photoshop", "adobe photoshop"),
    "Adobe Illustrator": ("illustrator", "adobe illustrator"),
    "Adobe InDesign": ("indesign", "adobe indesign"),
    "UX Design": ("ux", "ux design", "user experience", "ui/ux", "ux/ui"),
    "UI Design": ("ui", "ui design", "user interface design"),
    "User Research": ("user research", "usability testing"),
    "Prototyping": ("prototyping", "wireframing", "wireframes"),
    "Typography": ("typography",),
    # Healthcare, education, legal
    "EHR": ("ehr", "emr", "electronic health records", "epic ehr"),
    "HIPAA": ("hipaa",),
    "Patient Care": ("patient care",),
    "Clinical Research": ("clinical research", "clinical trials"),
    "Curriculum Development": ("curriculum development", "curriculum design"),
    "Instructional Design": ("instructional design",),
    "Classroom Management": ("classroom management",),
    "Grant Writing": ("grant writing",),
    "Research": ("research",),
    "Publications": ("peer-reviewed", "publications"),
    "Litigation": ("litigation",),
    "Legal Research": ("legal research",),
    "Contract Drafting": ("contract drafting", "contract review"),
    # Certifications
    "PMP": ("pmp",),
    "CPA": ("cpa",),
    "CFA": ("cfa",),
    "AWS Certified": ("aws certified",),
    "CISSP": ("cissp",),
    # Soft skills
    "Leadership": ("leadership", "team leadership"),
    "Communication": ("communication", "communication skills"),
    "Collaboration": ("collaboration", "cross-functional"),
    "Problem Solving": ("problem solving", "problem-solving"),
    "Mentoring": ("mentoring", "coaching"),
    "Public Speaking": ("public speaking", "presentations"),
}

TOKEN_RE = re.compile(r"[a-z0-9+#]+(?:[.\-/&][a-z0-9+#]+)*")
MAX_NGRAM = 4


def tokenize(text: str) -> list[str]:
    """Lower-case word tokens; keeps c++, c#, node.js, ci/cd intact."""
    return TOKEN_RE.findall(text.lower())


class SkillDictionary:
    """Maps surface terms found in text to canonical skill names."""

    def __init__(self, skills: dict[str, tuple[str, ...]] | None = None):
        self.skills = skills if skills is not None else SKILLS
        self._alias_index: dict[str, str] = {}
        for canonical, aliases in self.skills.items():
            names = list(aliases)
            # ".NET" tokenizes to "net"; only index lossless canonical names
            if " ".join(tokenize(canonical)) == canonical.lower():
                names.insert(0, canonical)
            for alias in names:
                key = " ".join(tokenize(alias))
                if key:
                    self._alias_index.setdefault(key, canonical)

    def canonical(self, term: str) -> str | None:
        return self._alias_index.get(" ".join(tokenize(term)))

    def find_terms(self, text: str) -> Counter:
        """Count dictionary surface terms in text, longest match first.

        "contract negotiation" is counted once as itself, never also as
        "negotiation".
        """
        tokens = tokenize(text)
        counts: Counter = Counter()
        i = 0
        while i < len(tokens):
            for n in range(min(MAX_NGRAM, len(tokens) - i), 0, -1):
                term = " ".join(tokens[i : i + n])
                if term in self._alias_index:
                    counts[term] += 1
                    i += n
                    break
            else:
                i += 1
        return counts

    def find_skills(self, text: str) -> frozenset[str]:
        return frozenset(self._alias_index[t] for t in self.find_terms(text))

    def frequencies(self, terms: Counter) -> dict[str, int]:
        """Roll surface-term counts up to canonical skills."""
        freq: Counter = Counter()
        for term, n in terms.items():
            freq[self._alias_index[term]] += n
        return dict(freq)


DEFAULT_DICTIONARY = SkillDictionary()
