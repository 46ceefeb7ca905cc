'''
Tests investigation_assigner.git_utils
'''
import os
import shutil
import tempfile
from git import Actor, Repo

from . import AssignerTest
from investigation_assigner import git_utils
from investigation_assigner.build_server import BuildServer


class TestGitUtils(AssignerTest):
    '''
    Tests importing the commits of a git repository as changes
    '''
    def setUp(self):
        super().setUp()
        self.repo_path = tempfile.mkdtemp(prefix='iaa_test_repo_')
        self.repo = Repo.init(self.repo_path)

        self._commit(Actor('Alice', 'alice@example.com'),
                     'Add the billing module',
                     {'billing/Invoice.py': 'class Invoice: pass\n',
                      'README.md': 'billing\n'})
        self._commit(Actor('Dave Smith', 'dave.smith@example.com'),
                     'Fix the refunds',
                     {'billing/refunds/RefundCalculator.py': 'x = 1\n'})

    def tearDown(self):
        super().tearDown()
        shutil.rmtree(self.repo_path, ignore_errors=True)

    def _commit(self, actor, message, files):
        for relative_path, content in files.items():
            absolute_path = os.path.join(self.repo_path, relative_path)
            os.makedirs(os.path.dirname(absolute_path), exist_ok=True)
            with open(absolute_path, 'w') as f:
                f.write(content)

        self.repo.index.add(list(files))
        return self.repo.index.commit(message, author=actor, committer=actor)

    def test_get_username(self):
        self.assertEqual(git_utils.get_username('Jane', 'Jane.Doe@example.com'),
                         'jane.doe')
        self.assertEqual(git_utils.get_username('jane ', ''), 'jane')

    def test_import_changes(self):
        changes = git_utils.import_changes(self.session,
                                           self.example_build,
                                           self.repo_path,
                                           'HEAD')

        self.assertEqual(len(changes), 2)
        first, second = changes
        self.assertEqual(first.committers, [self.alice])
        self.assertEqual(first.description, 'Add the billing module')
        self.assertEqual(sorted(first.relative_paths),
                         ['README.md', 'billing/Invoice.py'])

        self.assertEqual([user.username for user in second.committers],
                         ['dave.smith'])
        self.assertEqual(second.committers[0].name, 'Dave Smith')
        self.assertEqual(second.relative_paths,
                         ['billing/refunds/RefundCalculator.py'])

        self.assertEqual(
            BuildServer(self.session).get_changes_since_last_build(
                self.example_build),
            changes)

    def test_import_revision_range(self):
        changes = git_utils.import_changes(self.session,
                                           self.example_build,
                                           self.repo_path,
                                           'HEAD~1..HEAD')

        self.assertEqual(len(changes), 1)
        self.assertEqual(changes[0].description, 'Fix the refunds')
