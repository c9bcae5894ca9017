import os
here = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(here, 'statescript', 'release.py')) as release_file:
    exec(compile(release_file.read(), 'release.py', 'exec'), globals(), locals())

from setuptools import find_packages, setup

test_requirements = ['pytest',
                     'coverage',
                     'jinja2']

install_requires=[
    'WebOb >= 1.8.0',
    'MarkupSafe'
]

setup(
    name='statescript',
    version=version,
    description=description,
    long_description=long_description,
    classifiers=[
        'Intended Audience :: Developers',
        'Environment :: Web Environment',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    keywords='ssr hydration state json script xss',
    author=author,
    author_email=email,
    url=url,
    license=license,
    python_requires='>=3.6',
    packages=find_packages(exclude=('ez_setup', 'examples', 'tests', 'tests.*')),
    include_package_data=True,
    zip_safe=False,
    install_requires=install_requires,
    extras_require={
       'testing': test_requirements,
    },
)
