import setuptools

setuptools.setup(
    name='sql-timestamp',
    version='0.1',
    author='XuZhen86',
    packages=setuptools.find_namespace_packages(include=['sql_timestamp', 'sql_timestamp.*']),
    python_requires='>=3.11,<4',
    install_requires=[
        'absl-py>=2.1.0,<3',
        'jsonschema>=4.23.0,<5',
        'tzdata>=2024.1',
    ],
    entry_points={
        'console_scripts': [
            'sql-timestamp = sql_timestamp.main:app_run_main',
        ],
    },
)
