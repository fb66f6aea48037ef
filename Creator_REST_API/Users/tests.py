from django.contrib.auth.models import User
from django.test import TestCase

from Teams.models import Team

from .models import UserProfile, UserRole, UserStatus
from .serializers import UserSummarySerializer


class UserProfileTestCase(TestCase):
    def setUp(self):
        self.user = User.objects.create_user(
            username='testuser',
            email='test@example.com',
            password='testpass123'
        )
        self.team = Team.objects.create(name='Equipe', code='EQ-1')

    def test_profile_created_without_team(self):
        """Test that a new user gets a profile outside any team"""
        profile = UserProfile.objects.get(user=self.user)
        self.assertIsNone(profile.team)
        self.assertEqual(profile.role, UserRole.WITHOUT_TEAM)
        self.assertEqual(profile.status, UserStatus.NO_TEAM)

    def test_join_team(self):
        """Test joining a team activates the membership"""
        self.user.profile.join_team(self.team)

        profile = UserProfile.objects.get(user=self.user)
        self.assertEqual(profile.team, self.team)
        self.assertEqual(profile.role, UserRole.MEMBER)
        self.assertEqual(profile.status, UserStatus.ACTIVE)
        self.assertIn(profile, self.team.members.all())

    def test_deleting_team_keeps_profile(self):
        """Test that removing the team only clears the membership"""
        self.user.profile.join_team(self.team, role=UserRole.ADMIN)
        self.team.delete()

        profile = UserProfile.objects.get(user=self.user)
        self.assertIsNone(profile.team)

    def test_summary_serializer_falls_back_to_username(self):
        """Test the embedded user representation"""
        data = UserSummarySerializer(self.user).data
        self.assertEqual(data, {'id': self.user.id, 'name': 'testuser', 'email': 'test@example.com'})

        self.user.first_name = 'Ana'
        self.user.last_name = 'Souza'
        self.assertEqual(UserSummarySerializer(self.user).data['name'], 'Ana Souza')
