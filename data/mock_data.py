"""Seed data for the Courtside admin dashboard.

There is no database behind the dashboard yet: every session starts from
the datasets below. ``SEEDS`` maps each list view to a factory returning a
fresh copy, so one session's edits never leak into another.
"""

from datetime import date

MEMBERSHIP_TIERS = ('Rally Pass', 'Match Point', 'Tour Insider')
REGIONS = ('North', 'South', 'East', 'West', 'Central')
MEMBER_STATUSES = ('Active', 'Inactive')
TEAM_ROLES = ('Super Admin', 'Admin', 'Content Manager', 'Moderator')
MATCH_STATUSES = ('Live', 'Upcoming', 'Completed')

MEMBER_COUNT = 52

_MEMBER_NAMES = [
    'Sarah Johnson', 'Michael Chen', 'Emily Rodriguez', 'James Wilson', 'Amanda Lee',
    'David Brown', 'Jessica Taylor', 'Christopher Martinez', 'Lauren Anderson', 'Daniel Kim',
    'Rachel White', 'Matthew Garcia', 'Ashley Thompson', 'Ryan Moore', 'Jennifer Martin',
    'Kevin Jackson', 'Michelle Lee', 'Brandon Hall', 'Stephanie Allen', 'Justin Young',
    'Nicole Wright', 'Eric Lopez', 'Megan Hill', 'Andrew Scott', 'Samantha Green',
    'Joshua Adams', 'Christina Baker', 'Tyler Nelson', 'Rebecca Carter', 'Jonathan Mitchell',
    'Melissa Perez', 'Nicholas Roberts', 'Brittany Turner', 'Alexander Phillips', 'Amber Campbell',
    'Patrick Parker', 'Danielle Evans', 'Steven Edwards', 'Heather Collins', 'Timothy Stewart',
    'Kimberly Sanchez', 'Brian Morris', 'Angela Rogers', 'Jacob Reed', 'Kelly Cook',
    'Nathan Morgan', 'Laura Bell', 'Aaron Murphy', 'Maria Bailey', 'Kyle Rivera',
    'Hannah Cooper', 'Zachary Richardson',
]


def avatar_url(seed):
    return f"https://api.dicebear.com/7.x/avataaars/svg?seed={seed}"


def make_members():
    """Generate the 52 demo members.

    Tiers and regions rotate, every seventh member is inactive.
    """
    members = []
    for i in range(MEMBER_COUNT):
        members.append({
            'id': f"member-{i + 1}",
            'name': _MEMBER_NAMES[i % len(_MEMBER_NAMES)],
            'email': f"user{i + 1}@example.com",
            'avatar': avatar_url(i),
            'membership_tier': MEMBERSHIP_TIERS[i % 3],
            'join_date': date(2024, i // 10 + 1, i % 28 + 1).isoformat(),
            'region': REGIONS[i % 5],
            'status': 'Inactive' if i % 7 == 0 else 'Active',
            'last_active': date(2024, 12, i % 30 + 1).isoformat(),
        })
    return members


def make_team_members():
    return [
        {'id': 'team-1', 'name': 'Admin User', 'email': 'admin@pickleball.com',
         'avatar': avatar_url('admin'), 'role': 'Super Admin', 'last_active': '2024-12-01'},
        {'id': 'team-2', 'name': 'Jane Cooper', 'email': 'jane.cooper@pickleball.com',
         'avatar': avatar_url('jane'), 'role': 'Admin', 'last_active': '2024-12-01'},
        {'id': 'team-3', 'name': 'Mark Stevens', 'email': 'mark.stevens@pickleball.com',
         'avatar': avatar_url('mark'), 'role': 'Content Manager', 'last_active': '2024-11-30'},
        {'id': 'team-4', 'name': 'Lisa Anderson', 'email': 'lisa.anderson@pickleball.com',
         'avatar': avatar_url('lisa'), 'role': 'Moderator', 'last_active': '2024-11-29'},
        {'id': 'team-5', 'name': 'Tom Harris', 'email': 'tom.harris@pickleball.com',
         'avatar': avatar_url('tom'), 'role': 'Admin', 'last_active': '2024-11-30'},
    ]


def make_membership_tiers():
    return [
        {
            'id': 'tier-1',
            'name': 'Rally Pass',
            'price': 9.99,
            'features': [
                'Access to live match streams',
                'Basic match highlights',
                'Community forum access',
                'Monthly newsletter',
            ],
            'subscriber_count': 245,
            'monthly_revenue': 2447.55,
            'active': True,
        },
        {
            'id': 'tier-2',
            'name': 'Match Point',
            'price': 19.99,
            'features': [
                'All Rally Pass features',
                'HD quality streams',
                'Full match replays',
                'Exclusive player interviews',
                'Priority support',
                'Member-only events',
            ],
            'subscriber_count': 182,
            'monthly_revenue': 3638.18,
            'active': True,
        },
        {
            'id': 'tier-3',
            'name': 'Tour Insider',
            'price': 34.99,
            'features': [
                'All Match Point features',
                '4K ultra HD streams',
                'Behind-the-scenes content',
                'Early access to tickets',
                'Exclusive merchandise discounts',
                'Meet & greet opportunities',
                'VIP tournament access',
            ],
            'subscriber_count': 98,
            'monthly_revenue': 3429.02,
            'active': True,
        },
    ]


def make_live_matches():
    return [
        {'id': 'match-1', 'title': 'Championship Finals', 'player1': 'Ben Johns',
         'player2': 'Tyson McGuffin', 'status': 'Live',
         'scheduled_time': '2024-12-01T14:00:00', 'court': 'Center Court'},
        {'id': 'match-2', 'title': "Women's Semi-Finals", 'player1': 'Anna Leigh Waters',
         'player2': 'Catherine Parenteau', 'status': 'Upcoming',
         'scheduled_time': '2024-12-01T16:00:00', 'court': 'Court 1'},
        {'id': 'match-3', 'title': 'Mixed Doubles Final', 'player1': 'Riley Newman',
         'player2': 'Matt Wright', 'status': 'Upcoming',
         'scheduled_time': '2024-12-01T18:00:00', 'court': 'Center Court'},
    ]


def make_game_recaps():
    return [
        {
            'id': 'recap-1',
            'title': 'Incredible Rally at Championship',
            'thumbnail': 'https://images.unsplash.com/photo-1554068865-24cecd4e34b8?w=400&h=300&fit=crop',
            'duration': '10:34',
            'views': 15234,
            'upload_date': '2024-11-28',
            'description': 'Watch the most intense rally of the tournament',
        },
        {
            'id': 'recap-2',
            'title': "Women's Doubles Highlights",
            'thumbnail': 'https://images.unsplash.com/photo-1626224583764-f87db24ac4ea?w=400&h=300&fit=crop',
            'duration': '8:22',
            'views': 12891,
            'upload_date': '2024-11-27',
            'description': "Best moments from the women's doubles match",
        },
        {
            'id': 'recap-3',
            'title': 'Underdog Victory Story',
            'thumbnail': 'https://images.unsplash.com/photo-1622279457486-62dcc4a431d6?w=400&h=300&fit=crop',
            'duration': '12:15',
            'views': 18456,
            'upload_date': '2024-11-26',
            'description': 'An inspiring comeback victory',
        },
    ]


# View name -> (id prefix, factory)
SEEDS = {
    'members': ('member', make_members),
    'team': ('team', make_team_members),
    'tiers': ('tier', make_membership_tiers),
    'matches': ('match', make_live_matches),
    'recaps': ('recap', make_game_recaps),
}

# =============================================================================
# CHART SERIES
# =============================================================================
# Monthly series shown on the Overview and Insights pages.

ANALYTICS_DATA = {
    'user_growth': [
        {'month': 'Jun', 'users': 120},
        {'month': 'Jul', 'users': 180},
        {'month': 'Aug', 'users': 240},
        {'month': 'Sep', 'users': 320},
        {'month': 'Oct', 'users': 410},
        {'month': 'Nov', 'users': 525},
    ],
    'revenue_trend': [
        {'month': 'Jun', 'revenue': 3850},
        {'month': 'Jul', 'revenue': 5240},
        {'month': 'Aug', 'revenue': 6820},
        {'month': 'Sep', 'revenue': 7950},
        {'month': 'Oct', 'revenue': 8730},
        {'month': 'Nov', 'revenue': 9514},
    ],
    'region_data': [
        {'region': 'North', 'members': 125},
        {'region': 'South', 'members': 98},
        {'region': 'East', 'members': 142},
        {'region': 'West', 'members': 89},
        {'region': 'Central', 'members': 71},
    ],
}

PLAYER_INSIGHTS = {
    'performance_comparison': [
        {'stat': 'Power', 'value': 85},
        {'stat': 'Accuracy', 'value': 92},
        {'stat': 'Speed', 'value': 78},
        {'stat': 'Defense', 'value': 88},
        {'stat': 'Endurance', 'value': 82},
        {'stat': 'Strategy', 'value': 90},
    ],
    'win_trends': [
        {'month': 'Jun', 'wins': 142},
        {'month': 'Jul', 'wins': 165},
        {'month': 'Aug', 'wins': 178},
        {'month': 'Sep', 'wins': 195},
        {'month': 'Oct', 'wins': 210},
        {'month': 'Nov', 'wins': 228},
    ],
    # Player name -> monthly rating, months as in win_trends
    'rating_progression': {
        'Ben Johns': [2720, 2745, 2770, 2800, 2825, 2850],
        'Anna Leigh Waters': [2650, 2680, 2710, 2735, 2760, 2780],
        'Tyson McGuffin': [2580, 2605, 2635, 2665, 2695, 2720],
    },
}

TOP_PLAYERS = [
    {'rank': 1, 'name': 'Ben Johns', 'avatar': avatar_url('ben'), 'rating': 2850,
     'wins': 48, 'losses': 5, 'win_rate': 90.6, 'change': '+12'},
    {'rank': 2, 'name': 'Anna Leigh Waters', 'avatar': avatar_url('anna'), 'rating': 2780,
     'wins': 45, 'losses': 7, 'win_rate': 86.5, 'change': '+8'},
    {'rank': 3, 'name': 'Tyson McGuffin', 'avatar': avatar_url('tyson'), 'rating': 2720,
     'wins': 42, 'losses': 9, 'win_rate': 82.4, 'change': '+5'},
    {'rank': 4, 'name': 'Catherine Parenteau', 'avatar': avatar_url('catherine'), 'rating': 2680,
     'wins': 40, 'losses': 10, 'win_rate': 80.0, 'change': '-2'},
    {'rank': 5, 'name': 'Riley Newman', 'avatar': avatar_url('riley'), 'rating': 2650,
     'wins': 38, 'losses': 12, 'win_rate': 76.0, 'change': '+3'},
]
