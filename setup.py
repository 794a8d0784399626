from setuptools import setup, find_packages

setup(
    name='gridmix',
    version='0.1.0',
    packages=find_packages(exclude=['tests', 'tests.*']),
    include_package_data=True,
    package_data={
        'gridmix': ['configs/*.yml'],
    },
    python_requires='>=3.10',
    install_requires=[
        'click',       # CLI and stderr diagnostics
        'PyYAML',      # For parsing YAML config files
        'requests',    # For HTTP requests to the Carbon Intensity API
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    entry_points={
        'console_scripts': [
            'gridmix=gridmix.cli:main',
        ],
    },
    description='Daily generation mix and cleanest charging window from the GB Carbon Intensity API.',
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
)
