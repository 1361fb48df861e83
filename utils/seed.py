"""
Seed Module - Demo content for a fresh database

Runs at startup when SEED_DATABASE is enabled and from ``flask seed``.
Nothing is written if a profile already exists.
"""

from flask import current_app

from . import repository


DEFAULT_PROFILE = {
    'name': 'John Doe',
    'email': 'john.doe@email.com',
    'phone': '+62 812-3456-7890',
    'location': 'Jakarta, Indonesia',
    'age': 22,
    'position': 'Full Stack Developer',
    'tagline': 'Full Stack Developer & Tech Enthusiast',
    'bio': ('A Full Stack Developer with 5+ years of experience building web and mobile '
            'applications. Passionate about new technology and always ready for a new challenge.'),
    'image_url': 'https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d?auto=format&fit=crop&w=400&h=400',
}

DEFAULT_SKILLS = [
    {'name': 'React.js', 'category': 'Frontend', 'percentage': 90, 'icon': 'fab fa-react', 'order': 1},
    {'name': 'Node.js', 'category': 'Backend', 'percentage': 85, 'icon': 'fab fa-node-js', 'order': 2},
    {'name': 'Python', 'category': 'Backend', 'percentage': 80, 'icon': 'fab fa-python', 'order': 3},
    {'name': 'MongoDB', 'category': 'Database', 'percentage': 75, 'icon': 'fas fa-database', 'order': 4},
    {'name': 'Docker', 'category': 'DevOps', 'percentage': 70, 'icon': 'fab fa-docker', 'order': 5},
    {'name': 'AWS', 'category': 'Cloud', 'percentage': 75, 'icon': 'fab fa-aws', 'order': 6},
]

DEFAULT_EXPERIENCES = [
    {
        'title': 'Senior Full Stack Developer',
        'company': 'Tech Company Inc.',
        'description': ('Leading development of enterprise web applications using React, Node.js, '
                        'and cloud technologies. Mentoring junior developers and architecting scalable solutions.'),
        'start_date': '2021',
        'end_date': None,
        'current': True,
        'order': 1,
    },
    {
        'title': 'Frontend Developer',
        'company': 'Digital Agency',
        'description': ('Developed responsive web applications and collaborated with design teams '
                        'to create engaging user experiences using modern frontend technologies.'),
        'start_date': '2019',
        'end_date': '2021',
        'current': False,
        'order': 2,
    },
]

DEFAULT_EDUCATION = [
    {
        'degree': 'Bachelor of Computer Science',
        'institution': 'University of Technology',
        'description': ('Focused on software engineering and web development with honors degree. '
                        'Active in programming competitions and tech communities.'),
        'start_date': '2014',
        'end_date': '2018',
        'order': 1,
    },
]

DEFAULT_ACTIVITIES = [
    {'title': 'Hackathon Winner', 'description': 'First place in National Tech Hackathon 2022',
     'icon': 'fas fa-trophy', 'order': 1},
    {'title': 'Community Leader', 'description': 'Leading local developer community with 500+ members',
     'icon': 'fas fa-users', 'order': 2},
]

DEFAULT_VALUES = [
    {'title': 'Innovation',
     'description': 'Always seeking creative solutions and staying updated with latest technologies',
     'icon': 'fas fa-lightbulb', 'order': 1},
    {'title': 'Collaboration',
     'description': 'Building strong relationships and working effectively in teams',
     'icon': 'fas fa-handshake', 'order': 2},
    {'title': 'Quality',
     'description': 'Committed to delivering high-quality, maintainable code',
     'icon': 'fas fa-star', 'order': 3},
]

DEFAULT_ARTICLES = [
    {
        'title': 'Building a Modern Web App with React',
        'content': ('A complete tutorial on React Hooks and modern best practices for building '
                    'performant web applications...'),
        'excerpt': 'A complete tutorial on React Hooks and modern best practices for building performant web applications.',
        'category': 'React',
        'image_url': 'https://images.unsplash.com/photo-1498050108023-c5249f4df085?auto=format&fit=crop&w=800&h=400',
        'published': True,
    },
    {
        'title': 'Optimizing Node.js Backend Performance',
        'content': ('Tips and tricks for improving backend performance with caching and '
                    'database optimization...'),
        'excerpt': 'Tips and tricks for improving backend performance with caching and database optimization.',
        'category': 'Node.js',
        'image_url': 'https://images.unsplash.com/photo-1558494949-ef010cbdcc31?auto=format&fit=crop&w=800&h=400',
        'published': True,
    },
]


def seed_database():
    """
    Fill an empty database with demo content

    Returns:
        bool: True if data was written, False if a profile already existed
    """
    if repository.profile.get() is not None:
        current_app.logger.info("Database already has data, skipping seed.")
        return False

    current_app.logger.info("Seeding database with initial data...")
    repository.profile.upsert(DEFAULT_PROFILE)
    seed_sets = [
        (repository.skills, DEFAULT_SKILLS),
        (repository.experiences, DEFAULT_EXPERIENCES),
        (repository.education, DEFAULT_EDUCATION),
        (repository.activities, DEFAULT_ACTIVITIES),
        (repository.values, DEFAULT_VALUES),
        (repository.articles, DEFAULT_ARTICLES),
    ]
    for repo, rows in seed_sets:
        for row in rows:
            repo.create(dict(row))

    current_app.logger.info("✓ Database seeded successfully")
    return True


__all__ = ['seed_database']
